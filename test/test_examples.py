import pathlib

import pytest

from fingerling.manifest import FilenameMap
from fingerling.test_harness import load_manifest, run_example, run_example_cli, snapshot_tree


EXAMPLE_LIST = [
    'basic_assets',
]
EXAMPLE_PATHS = {
    name: (pathlib.Path(__file__).parent.parent / 'examples/' / f'{name}').with_suffix('.py')
    for name in EXAMPLE_LIST
}


def load_artifact(name: str):
    return FilenameMap.load_file((pathlib.Path(__file__).parent / 'artifacts' / name).with_suffix('.txt'))


@pytest.mark.parametrize('name', EXAMPLE_LIST)
def test_example(name: str, tmp_path: pathlib.Path):
    context = run_example(EXAMPLE_PATHS[name], tmp_path)
    manifest = load_manifest(context['output_dir'])

    assert manifest == load_artifact(name)
    assert list(manifest) == list(load_artifact(name))
    for fingerprinted in manifest.values():
        assert (context['output_dir'] / fingerprinted.lstrip('/')).is_file()


@pytest.mark.parametrize('name', EXAMPLE_LIST)
def test_example_rerun(name: str, tmp_path: pathlib.Path):
    """
    Run an example twice, and check that both runs produce byte-identical
    output trees.
    """
    context = run_example(EXAMPLE_PATHS[name], tmp_path)
    first = snapshot_tree(context['output_dir'])
    run_example(EXAMPLE_PATHS[name], tmp_path)
    second = snapshot_tree(context['output_dir'])

    assert first == second


@pytest.mark.parametrize('name', EXAMPLE_LIST)
def test_example_cli(name: str, tmp_path: pathlib.Path):
    """
    Run an example using the CLI, and check that run has the expected output.
    """
    output_dir = run_example_cli(EXAMPLE_PATHS[name], tmp_path)
    assert load_manifest(output_dir) == load_artifact(name)


def test_basic_assets_output(tmp_path: pathlib.Path):
    context = run_example(EXAMPLE_PATHS['basic_assets'], tmp_path)
    output_dir = context['output_dir']

    assert (output_dir / 'fonts').is_dir()
    assert list((output_dir / 'fonts').iterdir()) == []
    assert not list((output_dir / 'img').glob('.draft*'))
    assert (output_dir / 'js' / 'assets-077292625e3030f7b555023b555cda3c.js').read_text() == (
        '/*! example bundle | MIT */\n'
        'var a = 1;\n'
        'function greet(name) {\n'
        "return 'Hello, ' + name;\n"
        '}\n'
        'var url = "http://example.com/";\n'
        'var c = 3;\n'
    )
    assert (output_dir / 'css' / 'assets-dd3448b2a51c5a6edd77bd8391d18f6e.css').read_text() == (
        'body {\n'
        'margin: 0;\n'
        '}\n'
        '.wrap {\n'
        'max-width: 960px; \n'
        '}\n'
    )
