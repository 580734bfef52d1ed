"""
The fingerling command line, also usable as an API for project-specific
build scripts.
"""
from __future__ import annotations

import argparse
import importlib
import runpy
import sys
import typing as t
from importlib.metadata import version
from pathlib import Path

from .core import BuildSettings, Context, InputBuildSettings, Step
from .fingerprint import HASH_WINDOW
from .images import ImageFingerprintStep
from .minify import CSSBundleStep, JSBundleStep

if t.TYPE_CHECKING:
    from .manifest import FilenameMap


MANIFEST_NAME = 'assets.txt'


def default_steps() -> list[Step]:
    """
    The standard phases: images, then scripts, then stylesheets.
    """
    return [ImageFingerprintStep(), JSBundleStep(), CSSBundleStep()]


class BuildNamespace:
    """
    Internal used to preserve typing between InputBuildSettings, argparse, and
    BuildSettings.
    """
    input_dir: Path
    output_dir: Path
    manifest_file: Path | None
    hash_window: int
    purge_dirs: bool

    def __init__(self, settings: InputBuildSettings | None = None):
        if settings:
            self.__dict__.update(settings)

    def to_build_settings(self):
        """
        Convert this argparse-oriented namespace into a Context-ready
        BuildSettings.
        """
        return BuildSettings(
            input_dir=self.input_dir,
            output_dir=self.output_dir,
            manifest_file=self.manifest_file or self.output_dir / MANIFEST_NAME,
            hash_window=self.hash_window,
            purge_dirs=self.purge_dirs,
        )


class _VersionAction(argparse.Action):
    """
    Like argparse's `version` action, but only looks up the installed version
    when the option is given.
    """
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS,
                 help='show program\'s version number and exit'):
        super().__init__(option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        sys.stdout.write(f'{parser.prog} {version("fingerling")}\n')
        parser.exit()


def _positive_int(value: str):
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f'{value} is not a positive integer')
    return number


def parse_settings_args(settings: InputBuildSettings | None = None, argv: list[str] | None = None, **kw):
    """
    Combine an instance of InputBuildSettings with CLI arguments to produce a
    BuildNamespace, which can be easily turned into BuildSettings. Arguments
    given on the command line win over @settings, which win over defaults.
    """
    namespace = BuildNamespace(settings)

    parser = argparse.ArgumentParser(**kw)
    parser.add_argument('-i', '--input',
                        help='input directory with img/, js/ and css/ source folders',
                        type=Path,
                        dest='input_dir',
                        default=Path('resources/assets'))
    parser.add_argument('-o', '--output',
                        help='output directory for fingerprinted assets',
                        type=Path,
                        dest='output_dir',
                        default=Path('resources/public/assets'))
    parser.add_argument('--manifest',
                        help=f'path of the manifest file; defaults to {MANIFEST_NAME} in the output directory',
                        type=Path,
                        dest='manifest_file',
                        default=None)
    parser.add_argument('--hash-window',
                        help='number of leading bytes of each image to hash',
                        type=_positive_int,
                        default=HASH_WINDOW)
    parser.add_argument('--purge',
                        help='delete old assets from the output directory before building',
                        action=argparse.BooleanOptionalAction,
                        dest='purge_dirs',
                        default=True)

    return parser.parse_args(argv, namespace=namespace)


def run_from_steps(settings: InputBuildSettings | None,
                   steps: list[Step] | None = None,
                   context_cls: t.Type[Context] = Context,
                   **kw) -> FilenameMap:
    """
    Build a new Context from settings, Steps, and command line arguments.
    Then, execute a build using the new Context.
    """
    final_settings = parse_settings_args(settings, **kw)
    context = context_cls(final_settings.to_build_settings(), steps or default_steps())
    return context.run()


def main(arguments: list[str] | None = None):
    """
    fingerling main function. Builds using an optional config file and command
    line arguments; with neither, builds the default folders.
    """
    parser = argparse.ArgumentParser(description='Fingerprint and bundle static web assets.',
                                     allow_abbrev=False)
    parser.add_argument('--version',
                        action=_VersionAction)
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-m',
                       help='import path of a config file to build',
                       type=importlib.import_module,
                       dest='module',
                       default=None)
    group.add_argument('-c', '--config',
                       help='file path to a config file to build',
                       type=Path,
                       dest='config_file',
                       default=None)

    args, remaining = parser.parse_known_args(arguments)

    if args.config_file:
        label = str(args.config_file)
        namespace = runpy.run_path(label)
        settings: InputBuildSettings | None = namespace.get('SETTINGS')
        steps: list[Step] | None = namespace.get('STEPS')
        context: Context | None = namespace.get('CONTEXT')
    elif args.module:
        label = f'-m {args.module.__name__}'
        settings = getattr(args.module, 'SETTINGS', None)
        steps = getattr(args.module, 'STEPS', None)
        context = getattr(args.module, 'CONTEXT', None)
    else:
        label = ''
        settings = steps = context = None

    if context:
        context.run()
    else:
        prog = f'fingerling {label}'.rstrip()
        run_from_steps(settings, steps, argv=remaining, prog=prog)
