from typing import Any, List, Optional, Tuple

from satisfy.events import (
    DocStringRepr,
    ExamplesRepr,
    RowRepr,
    StatementRepr,
    StepRepr,
    TagRepr,
)


def statement(name: str, line: int = 1, tags: Optional[List[str]] = None, keyword: str = 'Scenario') -> StatementRepr:
    return StatementRepr(
        keyword=keyword,
        name=name,
        line=line,
        tags=[TagRepr(name=tag) for tag in (tags or [])],
    )


def rows(*cells: List[str]) -> List[RowRepr]:
    return [RowRepr(cells=list(row)) for row in cells]


def step(
    name: str,
    line: int = 1,
    keyword: str = 'Given',
    doc_string: Optional[str] = None,
    table: Optional[List[List[str]]] = None,
) -> StepRepr:
    return StepRepr(
        keyword=keyword,
        name=name,
        line=line,
        doc_string=DocStringRepr(value=doc_string) if doc_string is not None else None,
        rows=rows(*table) if table is not None else None,
    )


def examples(*cells: List[str], line: int = 1) -> ExamplesRepr:
    return ExamplesRepr(keyword='Examples', name='', line=line, rows=rows(*cells))


class RecordingSink:
    events: List[Tuple[str, Any]]

    def __init__(self) -> None:
        self.events = []

    def uri(self, uri: str) -> None:
        self.events.append(('uri', uri))

    def eof(self) -> None:
        self.events.append(('eof', None))

    def feature(self, feature: StatementRepr) -> None:
        self.events.append(('feature', feature))

    def background(self, background: StatementRepr) -> None:
        self.events.append(('background', background))

    def scenario(self, scenario: StatementRepr) -> None:
        self.events.append(('scenario', scenario))

    def scenario_outline(self, scenario_outline: StatementRepr) -> None:
        self.events.append(('scenario_outline', scenario_outline))

    def step(self, step: StepRepr) -> None:
        self.events.append(('step', step))

    def examples(self, examples: ExamplesRepr) -> None:
        self.events.append(('examples', examples))

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self.events]
