from pathlib import Path

import pytest

from fingerling.errors import FileReadError, OutputOpenError
from fingerling.manifest import FilenameMap


def test_empty_manifest():
    assert FilenameMap().dumps() == '{\n}\n'


def test_manifest_format():
    filename_map = FilenameMap()
    filename_map.record('img/photo.jpg', 'img/photo-85d91d1c49f0e76c9f449248936a0f85.jpg')
    filename_map.record('/js/assets.js', '/js/assets-240f985d91d1c49f0e78c9f44936a685.js')
    assert filename_map.dumps() == (
        '{\n'
        '"img/photo.jpg" "img/photo-85d91d1c49f0e76c9f449248936a0f85.jpg"\n'
        '"/js/assets.js" "/js/assets-240f985d91d1c49f0e78c9f44936a685.js"\n'
        '}\n'
    )


def test_manifest_quotes_not_escaped():
    filename_map = FilenameMap({'img/a"b.png': 'img/a"b-1.png'})
    assert filename_map.dumps() == '{\n"img/a"b.png" "img/a"b-1.png"\n}\n'


def test_dump_file_overwrites(tmp_path: Path):
    path = tmp_path / 'public' / 'assets.txt'
    FilenameMap({'a.png': 'a-1.png'}).dump_file(path)
    FilenameMap({'b.png': 'b-2.png'}).dump_file(path)
    assert path.read_bytes() == b'{\n"b.png" "b-2.png"\n}\n'


def test_dump_file_unwritable(tmp_path: Path):
    blocker = tmp_path / 'public'
    blocker.write_text('a file, not a folder')
    with pytest.raises(OutputOpenError) as exc_info:
        FilenameMap().dump_file(blocker / 'assets.txt')
    assert exc_info.value.path == blocker / 'assets.txt'


def test_load_file(tmp_path: Path):
    original = FilenameMap({
        'img/icons/arrow.svg': 'img/icons/arrow-ec307f9ba3e27c4774191a3ae13da074.svg',
        '/css/assets.css': '/css/assets-dd3448b2a51c5a6edd77bd8391d18f6e.css',
    })
    path = tmp_path / 'assets.txt'
    original.dump_file(path)
    loaded = FilenameMap.load_file(path)
    assert loaded == original
    assert list(loaded) == list(original)


def test_load_file_missing(tmp_path: Path):
    with pytest.raises(FileReadError):
        FilenameMap.load_file(tmp_path / 'assets.txt')


def test_loads_rejects_garbage():
    with pytest.raises(ValueError):
        FilenameMap.loads('{\nimg/a.png img/a-1.png\n}\n')
