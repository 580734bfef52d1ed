"""
Exceptions raised by the fingerling build phases.
"""
from __future__ import annotations

import typing as t
from pathlib import Path


class PipelineError(Exception):
    """
    Base class for errors which abort a single build phase or item, but never
    the whole run.
    """


class PathError(PipelineError):
    """
    A `PipelineError` tied to a specific filesystem path.
    """
    action = 'access'

    def __init__(self, path: Path, *args: t.Any):
        self.path = path
        super().__init__(*args)

    def __str__(self):
        reason = super().__str__()
        msg = f'Cannot {self.action} {self.path}'
        return f'{msg}: {reason}' if reason else msg


class DirectoryAccessError(PathError):
    """
    A directory to be scanned is missing, not a directory, or unreadable.
    """
    action = 'scan'


class FileReadError(PathError):
    action = 'read'


class FileCopyError(PathError):
    action = 'copy'


class OutputOpenError(PathError):
    """
    A destination file or folder could not be created or written.
    """
    action = 'write'


class DigestUnavailableError(PipelineError):
    """
    The configured hash algorithm is not available in this interpreter.
    """
    def __init__(self, hashname: str, *args: t.Any):
        self.hashname = hashname
        super().__init__(*args)

    def __str__(self):
        return f'Hash algorithm {self.hashname!r} is unavailable'
