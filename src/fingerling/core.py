"""
Core classes and types for the fingerling build pipeline.
"""
from __future__ import annotations

import abc
import typing as t
from pathlib import Path

from .errors import DirectoryAccessError, OutputOpenError, PipelineError
from .manifest import FilenameMap
from .paths import mirror_dir
from .pretty_utils import print_with_style


ContextDir = t.Literal['input_dir', 'output_dir']


class InputBuildSettings(t.TypedDict, total=False):
    """
    TypedDict for defining build settings in a fingerling config file.
    """
    input_dir: Path
    output_dir: Path
    manifest_file: Path | None
    hash_window: int
    purge_dirs: bool

class BuildSettings(t.TypedDict):
    """
    TypedDict for processed build settings ready for passing to Context.
    """
    input_dir: Path
    output_dir: Path
    manifest_file: Path
    hash_window: int
    purge_dirs: bool


def _is_hidden(path: Path):
    return path.name.startswith('.')


class Context:
    """
    A context and configuration class for building fingerling projects.
    """
    def __init__(self, settings: BuildSettings, steps: list[Step]):
        self.settings = settings
        self.steps: list[Step] = []
        for step in steps:
            self.steps.append(step)
            self.bind(step)

    @t.overload
    def __getitem__(self, key: ContextDir | t.Literal['manifest_file']) -> Path: ...
    @t.overload
    def __getitem__(self, key: t.Literal['hash_window']) -> int: ...
    @t.overload
    def __getitem__(self, key: t.Literal['purge_dirs']) -> bool: ...
    def __getitem__(self, key):
        return self.settings[key]

    def bind(self, step: Step):
        """
        Bind a Step to this Context.
        """
        step.bind(self)

    def find_inputs(self, path: Path) -> list[Path]:
        """
        Recursively list the files below @path, skipping dotfiles and
        dot-directories. The result is sorted by POSIX path so that repeated
        builds see files in the same order.
        """
        if not path.is_dir():
            raise DirectoryAccessError(path, 'not a directory')
        return sorted(self._walk(path), key=Path.as_posix)

    def _walk(self, path: Path) -> t.Iterator[Path]:
        try:
            children = list(path.iterdir())
        except OSError as e:
            raise DirectoryAccessError(path, e.strerror or str(e)) from e
        for candidate in children:
            if _is_hidden(candidate):
                continue
            if candidate.is_dir():
                yield from self._walk(candidate)
            elif candidate.is_file():
                yield candidate

    def mirror_dirs(self, input_paths: list[Path]):
        """
        Create the output folders corresponding to every source folder which
        holds at least one of @input_paths.
        """
        for folder in sorted({mirror_dir(self, p) for p in input_paths}):
            if folder.is_dir():
                continue
            print_with_style(f'Create folder: {folder}')
            try:
                folder.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise OutputOpenError(folder, e.strerror or str(e)) from e

    def purge_outputs(self):
        """
        Delete old assets from the output directory. Folders and dotfiles are
        left in place; files which cannot be deleted are reported and skipped.
        """
        if not self['output_dir'].exists():
            return
        for path in self.find_inputs(self['output_dir']):
            try:
                path.unlink()
            except OSError as e:
                print_with_style(f'Skipped {path}: Cannot delete: {e.strerror or e}',
                                 file='stderr', style='yellow')

    def run_phase(self, label: str, func: t.Callable[[], object]):
        """
        Run one pipeline phase, logging rather than propagating any
        `PipelineError` so that later phases still run.
        """
        print_with_style(label)
        try:
            func()
        except PipelineError as e:
            print_with_style(f'{label.rstrip(".")} - failure.\n{e}', file='stderr', style='red')

    def run(self) -> FilenameMap:
        """
        Execute a full build: purge the output directory, mirror source
        folders, run every Step in order, then write the manifest.
        """
        filename_map = FilenameMap()

        if self['purge_dirs']:
            self.run_phase('Delete old assets.', self.purge_outputs)

        self.run_phase(
            'Create asset folders.',
            lambda: self.mirror_dirs(self.find_inputs(self['input_dir']))
        )

        for step in self.steps:
            self.run_phase(step.description, lambda: step(step.find_inputs(), filename_map))

        self.run_phase('Write assets file.', lambda: filename_map.dump_file(self['manifest_file']))
        return filename_map


class Step(abc.ABC):
    """
    Abstract base class for Steps, the individual asset-producing phases of a
    build. Each Step processes the files of one source folder and records what
    it produced in the run's FilenameMap.
    """
    context: Context
    description = 'Process assets.'

    def __init__(self, source: str):
        self.source = source

    def bind(self, context: Context):
        """
        Bind this Step to a Context.
        """
        self.context = context

    def find_inputs(self):
        """
        Scan this Step's source folder.
        """
        return self.context.find_inputs(self.context['input_dir'] / self.source)

    @abc.abstractmethod
    def __call__(self, input_paths: list[Path], filename_map: FilenameMap) -> None:
        ...
