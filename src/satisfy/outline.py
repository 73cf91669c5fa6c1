from __future__ import annotations

import logging

from functools import singledispatch
from typing import Dict, List, Sequence
from re import Match

from satisfy.constants import PLACEHOLDER_PATTERN
from satisfy.model import Scenario, ScenarioOutline, Step, StepArgument, Table


logger = logging.getLogger(__name__)


def swap(text: str, headers: Sequence[str], row: Sequence[str]) -> str:
    """
    Replace every `<token>` in `text` with the cell in `row` under the heading `token`.

    A token without a matching heading is replaced with an empty string.
    """
    values: Dict[str, str] = dict(zip(headers, row))

    def replace(match: Match[str]) -> str:
        token = match.group(1)
        value = values.get(token, None)
        if value is None:
            logger.debug(f'no example column named "{token}", placeholder in "{text}" resolved to empty string')
            return ''

        return value

    return PLACEHOLDER_PATTERN.sub(replace, text)


@singledispatch
def substitute(arg: StepArgument, headers: Sequence[str], row: Sequence[str]) -> StepArgument:
    raise TypeError(f'unsupported step argument type {type(arg).__name__}')


@substitute.register
def _(arg: str, headers: Sequence[str], row: Sequence[str]) -> StepArgument:
    return swap(arg, headers, row)


@substitute.register
def _(arg: Table, headers: Sequence[str], row: Sequence[str]) -> StepArgument:
    return arg.map(lambda cell: swap(cell, headers, row))


def expand(outline: ScenarioOutline, examples: Table) -> List[Scenario]:
    """
    Create one scenario per data row in `examples`, the first row holds the headings.
    """
    if len(examples) < 1:
        return []

    headers = examples.headings
    rows = list(examples)[1:]

    scenarios: List[Scenario] = []
    for row in rows:
        steps = [
            Step(
                keyword=step.keyword,
                name=swap(step.name, headers, row),
                line=step.line,
                args=[substitute(arg, headers, row) for arg in step.args],
            )
            for step in outline.steps
        ]
        scenarios.append(Scenario(name=outline.name, line=outline.line, tags=list(outline.tags), steps=steps))

    logger.debug(f'expanded outline "{outline.name}" into {len(scenarios)} scenarios')

    return scenarios
