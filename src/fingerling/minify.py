"""
Steps for reducing the load cost of webpages by combining and minifying
scripts and stylesheets.
"""
from __future__ import annotations

import re
from pathlib import Path

from .errors import FileReadError
from .fingerprint import checksum_text
from .manifest import FilenameMap
from .paths import output_path
from .simple import BaseStandardStep


# Block comments, except `/*!` license headers.
BLOCK_COMMENT_RE = re.compile(r'/\*(?!!).*?\*/', re.DOTALL)
# `//` comments at the start of a line or after blanks. `//` directly after
# other characters is kept, since it may belong to a URL or regex literal.
LINE_COMMENT_RE = re.compile(r'(?:\A|(?<=[\n\r])|[ \t]+)//[^\n\r]*')
LEADING_SPACE_RE = re.compile(r'(\A|[\n\r])[ \t]+')
BLANK_LINES_RE = re.compile(r'[\n\r]+')


def minify(text: str) -> str:
    """
    Remove comments, leading spaces and blank lines from a script or
    stylesheet. This is purely textual: comment markers inside string literals
    are stripped all the same.
    """
    # Removing one comment can join its neighbours into another, as in
    # `//* a */* b */`, so repeat until nothing is left.
    while (stripped := BLOCK_COMMENT_RE.sub('', text)) != text:
        text = stripped
    text = LINE_COMMENT_RE.sub('', text)
    text = LEADING_SPACE_RE.sub(r'\1', text)
    return BLANK_LINES_RE.sub('\n', text).lstrip('\n')


class BundleStep(BaseStandardStep):
    """
    Concatenates and minifies every file of a source folder into one
    fingerprinted file. The bundle named `/js/assets` with extension `.js` is
    written to `<output>/js/assets-<md5>.js` and recorded as `/js/assets.js`.
    """
    def __init__(self, source: str, base_name: str, ext: str):
        super().__init__(source)
        self.base_name = base_name
        self.ext = ext

    def read_source(self, path: Path):
        try:
            with path.open(encoding=self.encoding, newline='') as file:
                return file.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(path, str(e)) from e

    def concat_minified(self, input_paths: list[Path]):
        """
        Minify each of @input_paths and join the results in order. Any
        unreadable file aborts the whole bundle.
        """
        return ''.join(minify(self.read_source(p)) for p in input_paths)

    def __call__(self, input_paths: list[Path], filename_map: FilenameMap):
        contents = self.concat_minified(input_paths)
        digest = checksum_text(contents, self.encoding)
        src_name = f'{self.base_name}{self.ext}'
        dest_name = f'{self.base_name}-{digest}{self.ext}'
        target_path = output_path(self.context, dest_name)
        self.write_output(target_path, contents)
        filename_map.record(src_name, dest_name, input_paths, target_path)


class JSBundleStep(BundleStep):
    description = 'Concatenate and minify javascript assets.'

    def __init__(self, source: str = 'js', base_name: str = '/js/assets'):
        super().__init__(source, base_name, '.js')


class CSSBundleStep(BundleStep):
    description = 'Concatenate and minify css assets.'

    def __init__(self, source: str = 'css', base_name: str = '/css/assets'):
        super().__init__(source, base_name, '.css')
