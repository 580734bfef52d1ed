"""
Internal utilities for progress bars and pretty printing.
"""
import sys
import typing as t

import rich.console
import rich.progress


_rich_consoles = {
    'stdout': rich.console.Console(file=sys.stdout),
    'stderr': rich.console.Console(file=sys.stderr),
}


T = t.TypeVar('T')


def track_progress(iterable: t.Sequence[T], desc: str) -> t.Iterable[T]:
    """
    Progress tracker using rich progress bars.
    """
    yield from rich.progress.track(iterable, desc, console=_rich_consoles['stdout'])


def print_with_style(*args, sep=' ', end='\n', file: str = 'stdout', style=None):
    """
    Enhanced print() function which supports rich console styles. Markup is
    disabled so that paths containing brackets print verbatim.
    """
    _rich_consoles[file].print(*args, sep=sep, end=end, style=style, markup=False)
