from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Protocol, Sequence, Union
from dataclasses import dataclass, field

from satisfy.constants import TAG_MARKER, METADATA_MARKER, DEFAULT_FEATURE_TYPE


class TagLike(Protocol):
    name: str


class StatementLike(Protocol):
    """What the parser hands over for a feature, background, scenario or outline."""

    name: str
    line: int
    tags: Sequence[TagLike]


class Taggable(Protocol):
    name: str
    line: int
    tags: List[str]


def strip_tags(tags: Iterable[TagLike]) -> List[str]:
    stripped: List[str] = []
    for tag in tags:
        name = tag.name
        if name.startswith(TAG_MARKER):
            name = name[len(TAG_MARKER) :]
        stripped.append(name)

    return stripped


def tags_hash(tags: Iterable[str]) -> Dict[str, Any]:
    return {tag: True for tag in tags}


class Table:
    """
    Rows of string cells, as attached to a step or used as examples.

    All rows are expected to have the same length, the parser refuses tables
    where that is not the case. When used as examples the first row holds the
    headings.
    """

    _rows: List[List[str]]

    def __init__(self, rows: Iterable[Iterable[str]]) -> None:
        self._rows = [list(row) for row in rows]

    def __getitem__(self, index: int) -> List[str]:
        return list(self._rows[index])

    def __iter__(self) -> Iterator[List[str]]:
        for row in self._rows:
            yield list(row)

    def __len__(self) -> int:
        return len(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented

        return self._rows == other._rows

    def __repr__(self) -> str:
        return f'Table({self._rows!r})'

    @property
    def raw(self) -> List[List[str]]:
        return [list(row) for row in self._rows]

    @property
    def headings(self) -> List[str]:
        if len(self._rows) < 1:
            return []

        return list(self._rows[0])

    def hashes(self) -> List[Dict[str, str]]:
        headings = self.headings

        return [dict(zip(headings, row)) for row in self._rows[1:]]

    def rows_hash(self) -> Dict[str, str]:
        rows_hash: Dict[str, str] = {}
        for row in self._rows:
            if len(row) != 2:
                raise ValueError(f'rows_hash requires exactly two columns, got {len(row)}')

            key, value = row
            rows_hash.update({key: value})

        return rows_hash

    def map(self, func: Callable[[str], str]) -> Table:
        return Table([[func(cell) for cell in row] for row in self._rows])


StepArgument = Union[str, Table]


@dataclass(frozen=True)
class Step:
    keyword: str
    name: str
    line: int
    args: List[StepArgument] = field(default_factory=list)

    def __str__(self) -> str:
        return f'{self.keyword} {self.name}'


@dataclass
class Background:
    name: str
    line: int
    steps: List[Step] = field(default_factory=list)

    @classmethod
    def from_repr(cls, statement: StatementLike) -> Background:
        return cls(name=statement.name, line=statement.line)


@dataclass
class Scenario:
    name: str
    line: int
    tags: List[str] = field(default_factory=list)
    steps: List[Step] = field(default_factory=list)

    @classmethod
    def from_repr(cls, statement: StatementLike) -> Scenario:
        return cls(name=statement.name, line=statement.line, tags=strip_tags(statement.tags))

    @property
    def tags_hash(self) -> Dict[str, Any]:
        return tags_hash(self.tags)

    @property
    def metadata(self) -> Dict[str, Any]:
        return self.tags_hash


@dataclass
class ScenarioOutline:
    """Template scenario, only lives until its examples have been expanded."""

    name: str
    line: int
    tags: List[str] = field(default_factory=list)
    steps: List[Step] = field(default_factory=list)

    @classmethod
    def from_repr(cls, statement: StatementLike) -> ScenarioOutline:
        return cls(name=statement.name, line=statement.line, tags=strip_tags(statement.tags))

    @property
    def tags_hash(self) -> Dict[str, Any]:
        return tags_hash(self.tags)

    @property
    def metadata(self) -> Dict[str, Any]:
        return self.tags_hash


@dataclass
class Feature:
    name: str
    line: int
    tags: List[str] = field(default_factory=list)
    scenarios: List[Scenario] = field(default_factory=list)
    backgrounds: List[Background] = field(default_factory=list)
    feature_type: str = field(default=DEFAULT_FEATURE_TYPE)
    uri: Optional[str] = field(default=None)

    @classmethod
    def from_repr(cls, statement: StatementLike, *, feature_type: str = DEFAULT_FEATURE_TYPE, uri: Optional[str] = None) -> Feature:
        return cls(
            name=statement.name,
            line=statement.line,
            tags=strip_tags(statement.tags),
            feature_type=feature_type,
            uri=uri,
        )

    @property
    def tags_hash(self) -> Dict[str, Any]:
        return tags_hash(self.tags)

    @property
    def metadata(self) -> Dict[str, Any]:
        metadata = self.tags_hash
        metadata.update({'type': self.feature_type, METADATA_MARKER: True})

        return metadata


StepContainer = Union[Scenario, Background, ScenarioOutline]
