from __future__ import annotations

import logging

from typing import List, Optional, Protocol, Union
from dataclasses import dataclass, field
from pathlib import Path

from behave.parser import parse_file
from behave.model import Background, Feature, Scenario, ScenarioOutline, Step, Table

from satisfy.constants import TAG_MARKER


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TagRepr:
    name: str


@dataclass(frozen=True)
class DocStringRepr:
    value: str


@dataclass(frozen=True)
class RowRepr:
    cells: List[str]


@dataclass(frozen=True)
class StatementRepr:
    keyword: str
    name: str
    line: int
    tags: List[TagRepr] = field(default_factory=list)


@dataclass(frozen=True)
class StepRepr:
    keyword: str
    name: str
    line: int
    doc_string: Optional[DocStringRepr] = field(default=None)
    rows: Optional[List[RowRepr]] = field(default=None)


@dataclass(frozen=True)
class ExamplesRepr:
    keyword: str
    name: str
    line: int
    rows: List[RowRepr] = field(default_factory=list)


class EventSink(Protocol):
    """Receives the structure of a feature document, in document order."""

    def uri(self, uri: str) -> None: ...

    def eof(self) -> None: ...

    def feature(self, feature: StatementRepr) -> None: ...

    def background(self, background: StatementRepr) -> None: ...

    def scenario(self, scenario: StatementRepr) -> None: ...

    def scenario_outline(self, scenario_outline: StatementRepr) -> None: ...

    def step(self, step: StepRepr) -> None: ...

    def examples(self, examples: ExamplesRepr) -> None: ...


def parse_document(path: Union[str, Path], language: Optional[str] = None) -> Optional[Feature]:
    """
    Parse a feature document with behave.

    Errors from reading or parsing the document are not handled here. `None` is
    returned for a document that does not contain a feature.
    """
    return parse_file(str(path), language=language)


def _tags(tags: List[str]) -> List[TagRepr]:
    return [TagRepr(name=f'{TAG_MARKER}{tag}') for tag in tags]


def _rows(table: Optional[Table]) -> Optional[List[RowRepr]]:
    if table is None:
        return None

    rows = [RowRepr(cells=list(table.headings))]
    rows.extend([RowRepr(cells=list(row.cells)) for row in table.rows])

    return rows


def _step(step: Step) -> StepRepr:
    doc_string = DocStringRepr(value=str(step.text)) if step.text is not None else None

    return StepRepr(
        keyword=step.keyword,
        name=step.name,
        line=step.line,
        doc_string=doc_string,
        rows=_rows(step.table),
    )


def _scenario(scenario: Union[Scenario, ScenarioOutline], sink: EventSink) -> None:
    statement = StatementRepr(
        keyword=scenario.keyword,
        name=scenario.name,
        line=scenario.line,
        tags=_tags(scenario.tags),
    )

    if isinstance(scenario, ScenarioOutline):
        sink.scenario_outline(statement)
    else:
        sink.scenario(statement)

    for step in scenario.steps:
        sink.step(_step(step))

    if not isinstance(scenario, ScenarioOutline):
        return

    for examples in scenario.examples:
        sink.examples(
            ExamplesRepr(
                keyword=examples.keyword,
                name=examples.name,
                line=examples.line,
                rows=_rows(examples.table) or [],
            )
        )


def _background(background: Optional[Background], sink: EventSink) -> None:
    if background is None:
        return

    sink.background(StatementRepr(keyword=background.keyword, name=background.name, line=background.line))
    for step in background.steps:
        sink.step(_step(step))


def emit(feature: Optional[Feature], sink: EventSink, uri: str) -> None:
    """
    Walk a parsed behave feature and send its structure to `sink`.
    """
    sink.uri(uri)

    if feature is None:
        logger.debug(f'{uri} does not contain a feature')
        sink.eof()
        return

    sink.feature(
        StatementRepr(
            keyword=feature.keyword,
            name=feature.name,
            line=feature.line,
            tags=_tags(feature.tags),
        )
    )

    _background(feature.background, sink)

    for scenario in feature.scenarios:
        _scenario(scenario, sink)

    # scenarios inside a rule belong to the feature, rules follow all feature level scenarios
    for rule in feature.rules:
        logger.debug(f'rule "{rule.name}" at line {rule.line}')
        if rule.background is not feature.background:
            _background(rule.background, sink)

        for scenario in rule.scenarios:
            _scenario(scenario, sink)

    sink.eof()
