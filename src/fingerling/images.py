"""
Steps for fingerprinting image assets.
"""
from __future__ import annotations

import shutil
from pathlib import Path, PurePosixPath

from .core import Step
from .errors import FileCopyError, FileReadError
from .fingerprint import checksum, fingerprint_name
from .manifest import FilenameMap
from .paths import mirror_dir, source_key
from .pretty_utils import print_with_style, track_progress


class ImageFingerprintStep(Step):
    """
    Copies each image to the mirrored output folder under a fingerprinted
    name, e.g. `img/logo.png` to `img/logo-<md5>.png`. Files which cannot be
    read or copied are reported and skipped.
    """
    description = 'Create image assets.'

    def __init__(self, source: str = 'img'):
        super().__init__(source)

    def fingerprint(self, path: Path):
        """
        Copy a single image into place and return its source key, output key
        and output path.
        """
        digest = checksum(path, self.context['hash_window'])
        new_name = fingerprint_name(path.name, digest)
        target_path = mirror_dir(self.context, path) / new_name
        try:
            target_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy(path, target_path)
        except OSError as e:
            raise FileCopyError(path, e.strerror or str(e)) from e

        key = source_key(self.context, path)
        return key, str(PurePosixPath(key).with_name(new_name)), target_path

    def __call__(self, input_paths: list[Path], filename_map: FilenameMap):
        for path in track_progress(input_paths, 'Fingerprinting...'):
            try:
                key, new_key, target_path = self.fingerprint(path)
            except (FileReadError, FileCopyError) as e:
                print_with_style(f'Skipped {path}: {e}', file='stderr', style='yellow')
                continue
            filename_map.record(key, new_key, [path], target_path)
