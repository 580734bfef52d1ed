"""
fingerling is a small static asset pipeline: it fingerprints images, bundles
and minifies scripts and stylesheets, and writes a manifest mapping original
names to fingerprinted ones.
"""
from .core import BuildSettings, Context, InputBuildSettings, Step
from .errors import (
    DigestUnavailableError, DirectoryAccessError, FileCopyError, FileReadError,
    OutputOpenError, PipelineError,
)
from .fingerprint import HASH_WINDOW, checksum, checksum_text, fingerprint_name
from .images import ImageFingerprintStep
from .manifest import FilenameMap
from .minify import BundleStep, CSSBundleStep, JSBundleStep, minify
