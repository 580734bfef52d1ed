"""
A base class for Steps writing their own output files.
"""
from __future__ import annotations

from pathlib import Path

from .core import Step
from .errors import OutputOpenError


class BaseStandardStep(Step):
    """
    A base class providing helper behaviors for typical steps creating output
    files.
    """
    encoding = 'utf-8'
    newline = '\n'

    def ensure_output_dir(self, output_path: Path):
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputOpenError(output_path.parent, e.strerror or str(e)) from e

    def write_output(self, output_path: Path, data: str):
        """
        Write @data to @output_path, replacing any existing file and creating
        its folder.
        """
        self.ensure_output_dir(output_path)
        try:
            with output_path.open('w', encoding=self.encoding, newline=self.newline) as file:
                file.write(data)
        except OSError as e:
            raise OutputOpenError(output_path, e.strerror or str(e)) from e
