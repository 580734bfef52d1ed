import pytest

from fingerling.core import BuildSettings, Context


@pytest.fixture
def build_settings(tmp_path):
    return BuildSettings(
        input_dir=tmp_path / 'input',
        output_dir=tmp_path / 'output',
        manifest_file=tmp_path / 'output' / 'assets.txt',
        hash_window=500_000,
        purge_dirs=True,
    )


@pytest.fixture
def empty_context(build_settings: BuildSettings):
    build_settings['input_dir'].mkdir()
    return Context(build_settings, [])
