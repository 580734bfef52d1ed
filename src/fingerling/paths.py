"""
Helpers for mapping source paths onto the output tree and manifest keys.
"""
from __future__ import annotations

import typing as t
from pathlib import Path

if t.TYPE_CHECKING:
    from .core import Context


def source_key(context: Context, path: Path) -> str:
    """
    The manifest key of a source file: its POSIX path relative to the input
    directory, e.g. `img/icons/arrow.svg`.
    """
    return path.relative_to(context['input_dir']).as_posix()


def mirror_dir(context: Context, path: Path) -> Path:
    """
    The output directory corresponding to the folder holding source file
    @path.
    """
    return context['output_dir'] / path.parent.relative_to(context['input_dir'])


def output_path(context: Context, name: str) -> Path:
    """
    Resolve a manifest-style name like `/js/assets.js` against the output
    directory.
    """
    return context['output_dir'] / name.lstrip('/')
