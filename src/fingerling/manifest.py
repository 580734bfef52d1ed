"""
The filename map collected during a build, and its manifest file format.
"""
from __future__ import annotations

import re
import typing as t
from pathlib import Path

from .errors import FileReadError, OutputOpenError
from .pretty_utils import print_with_style

if t.TYPE_CHECKING:
    from collections.abc import Sequence


_ENTRY_RE = re.compile(r'"(?P<original>.*?)" "(?P<fingerprinted>.*)"')


class FilenameMap(dict[str, str]):
    """
    Maps original asset names to fingerprinted asset names, e.g.
    `img/image.jpg` to `img/image-85d91d1c49f0e76c9f449248936a0f85.jpg`.
    Entries keep insertion order, which is the order they are written in.
    """
    encoding = 'utf-8'
    newline = '\n'

    def record(self,
               original: str,
               fingerprinted: str,
               sources: Sequence[Path] = (),
               output: Path | None = None):
        """
        Add a mapping once its output file exists, logging the step which
        produced it.
        """
        self[original] = fingerprinted
        self.log_step(sources, output or Path(fingerprinted))

    def log_step(self, sources: Sequence[Path], output: Path):
        """
        Log the inputs and output of a completed step.
        """
        if len(sources) == 1:
            msg = f'{sources[0]} ⇒ {output}'
        else:
            msg = ''.join([
                '{\n\t',
                ',\n\t'.join(str(s) for s in sources),
                f'\n}} ⇒ {output}',
            ])
        print_with_style(msg)

    def dumps(self):
        """
        Serialize this map to the manifest format. Quotes inside names are not
        escaped.
        """
        lines = ['{']
        lines.extend(f'"{original}" "{fingerprinted}"' for original, fingerprinted in self.items())
        lines.append('}')
        return ''.join(f'{line}\n' for line in lines)

    def dump_file(self, path: Path):
        """
        Write this map to a manifest file, replacing any existing one.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open('w', encoding=self.encoding, newline=self.newline) as file:
                file.write(self.dumps())
        except OSError as e:
            raise OutputOpenError(path, e.strerror or str(e)) from e

    @classmethod
    def loads(cls, data: str):
        """
        Parse the manifest format produced by `dumps()`.
        """
        filename_map = cls()
        for line in data.splitlines():
            if match := _ENTRY_RE.fullmatch(line):
                filename_map[match['original']] = match['fingerprinted']
            elif line not in ('{', '}', ''):
                raise ValueError(f'Malformed manifest line: {line!r}')
        return filename_map

    @classmethod
    def load_file(cls, path: Path):
        try:
            data = path.read_text(cls.encoding)
        except OSError as e:
            raise FileReadError(path, e.strerror or str(e)) from e
        return cls.loads(data)
