"""
Content hashing and fingerprinted filename derivation.
"""
from __future__ import annotations

import hashlib
from pathlib import Path

from .errors import DigestUnavailableError, FileReadError


DIGEST_NAME = 'md5'
# Image digests only cover this many leading bytes, which keeps fingerprints
# compatible with those produced by earlier builds.
HASH_WINDOW = 500_000


def new_digest(hashname: str = DIGEST_NAME):
    """
    Create a fresh hash object, raising `DigestUnavailableError` if @hashname
    isn't supported.
    """
    try:
        return hashlib.new(hashname, usedforsecurity=False)
    except ValueError as e:
        raise DigestUnavailableError(hashname) from e


def checksum(path: Path, window: int = HASH_WINDOW, hashname: str = DIGEST_NAME):
    """
    Calculate a hex checksum over at most the first @window bytes of @path.
    Smaller files are hashed in full.
    """
    digest = new_digest(hashname)
    try:
        with path.open('rb') as file:
            digest.update(file.read(window))
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e
    return digest.hexdigest()


def checksum_text(text: str, encoding: str = 'utf-8', hashname: str = DIGEST_NAME):
    """
    Calculate a hex checksum over the complete encoded @text.
    """
    digest = new_digest(hashname)
    digest.update(text.encode(encoding))
    return digest.hexdigest()


def fingerprint_name(name: str, digest: str):
    """
    Insert @digest before the last extension of @name:
    `photo.min.jpg` becomes `photo.min-<digest>.jpg`.
    """
    path = Path(name)
    return f'{path.stem}-{digest}{path.suffix}'
