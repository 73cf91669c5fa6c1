from __future__ import annotations

import logging

from typing import List
from functools import singledispatch
from argparse import Namespace as Arguments
from pathlib import Path

from behave.parser import ParserError
from colorama import init, Fore

from satisfy.builder import Builder, BuilderStateError
from satisfy.constants import FEATURE_FILE_PATTERN
from satisfy.model import Feature, Step, StepArgument, Table, Taggable


logger = logging.getLogger(__name__)

INDENT = '  '


def find_feature_files(paths: List[str]) -> List[Path]:
    files: List[Path] = []

    if paths == ['.']:
        return sorted(Path.cwd().glob(FEATURE_FILE_PATTERN))

    for path in paths:
        file = Path(path)

        if file.is_dir():
            files.extend(sorted(file.glob(FEATURE_FILE_PATTERN)))
        else:
            files.append(file)

    return files


def _format_tags(entity: Taggable) -> str:
    if len(entity.tags) < 1:
        return ''

    return ' ' + ' '.join([f'{Fore.CYAN}@{tag}{Fore.RESET}' for tag in entity.tags])


@singledispatch
def _format_arg(arg: StepArgument, depth: int) -> List[str]:
    raise TypeError(f'unsupported step argument type {type(arg).__name__}')


@_format_arg.register
def _(arg: str, depth: int) -> List[str]:
    marker = f'{INDENT * depth}{Fore.YELLOW}"""{Fore.RESET}'

    return [marker, *[f'{INDENT * depth}{line}' for line in arg.splitlines()], marker]


@_format_arg.register
def _(arg: Table, depth: int) -> List[str]:
    return [f'{INDENT * depth}| ' + ' | '.join(row) + ' |' for row in arg]


def _format_step(step: Step, depth: int) -> List[str]:
    lines = [f'{INDENT * depth}{Fore.GREEN}{step.keyword}{Fore.RESET} {step.name}']

    for arg in step.args:
        lines.extend(_format_arg(arg, depth + 1))

    return lines


def feature_to_text(feature: Feature) -> str:
    """Debug view of a built feature, not meant to be parsed."""
    lines = [f'{Fore.MAGENTA}Feature:{Fore.RESET} {feature.name}{_format_tags(feature)}']

    for background in feature.backgrounds:
        lines.append(f'{INDENT}{Fore.MAGENTA}Background:{Fore.RESET} {background.name}')
        for step in background.steps:
            lines.extend(_format_step(step, 2))

    for scenario in feature.scenarios:
        lines.append(f'{INDENT}{Fore.MAGENTA}Scenario:{Fore.RESET} {scenario.name} (line {scenario.line}){_format_tags(scenario)}')
        for step in scenario.steps:
            lines.extend(_format_step(step, 2))

    return '\n'.join(lines)


def cli(args: Arguments) -> int:
    # init colorama for ansi colors
    init()

    files = find_feature_files(args.files)
    logger.debug(f'found {len(files)} feature files')

    builder = Builder(feature_type=args.type, language=args.language)

    rc: int = 0
    for file in files:
        built = len(builder.specs)
        try:
            builder.parse(file)
        except (OSError, UnicodeDecodeError, ParserError, BuilderStateError) as e:
            rc = 1
            print(f'{file.as_posix()}\t{Fore.RED}error{Fore.RESET}\t{e}')
            continue

        for feature in builder.specs[built:]:
            print(feature_to_text(feature))

    return rc
