from __future__ import annotations

import logging

from typing import List, Optional, Sequence, Union
from dataclasses import dataclass, field
from pathlib import Path

from satisfy.constants import DEFAULT_FEATURE_TYPE
from satisfy.events import ExamplesRepr, RowRepr, StatementRepr, StepRepr, emit, parse_document
from satisfy.model import (
    Background,
    Feature,
    Scenario,
    ScenarioOutline,
    Step,
    StepArgument,
    StepContainer,
    Table,
)
from satisfy.outline import expand


logger = logging.getLogger(__name__)


class BuilderStateError(RuntimeError):
    pass


@dataclass
class BuilderContext:
    """
    Where the next event ends up.

    `feature` receives scenarios, backgrounds and expanded outlines, `container`
    receives steps.
    """

    feature: Optional[Feature] = field(default=None)
    container: Optional[StepContainer] = field(default=None)
    uri: Optional[str] = field(default=None)

    def enter_document(self, uri: str) -> None:
        self.uri = uri
        self.feature = None
        self.container = None

    def enter_feature(self, feature: Feature) -> None:
        self.feature = feature
        self.container = None

    def enter_container(self, container: StepContainer) -> None:
        self.container = container

    def require_feature(self, event: str) -> Feature:
        if self.feature is None:
            raise BuilderStateError(f'{event} received before any feature')

        return self.feature

    def require_container(self, event: str) -> StepContainer:
        if self.container is None:
            raise BuilderStateError(f'{event} received before any scenario, background or scenario outline')

        return self.container

    def require_outline(self, event: str) -> ScenarioOutline:
        container = self.require_container(event)
        if not isinstance(container, ScenarioOutline):
            raise BuilderStateError(f'{event} received for {container.__class__.__name__} "{container.name}", expected a scenario outline')

        return container


def rows_to_table(rows: Sequence[RowRepr]) -> Table:
    return Table([list(row.cells) for row in rows])


def step_args(step: StepRepr) -> List[StepArgument]:
    args: List[StepArgument] = []

    if step.doc_string is not None:
        args.append(step.doc_string.value)

    if step.rows is not None:
        args.append(rows_to_table(step.rows))

    return args


class Builder:
    """
    Builds features from the events emitted while a feature document is parsed.

    The builder is the event sink, every handler works on `context` and
    appends to `specs`.
    """

    specs: List[Feature]
    context: BuilderContext
    feature_type: str
    language: Optional[str]

    def __init__(self, feature_type: str = DEFAULT_FEATURE_TYPE, language: Optional[str] = None) -> None:
        self.specs = []
        self.context = BuilderContext()
        self.feature_type = feature_type
        self.language = language

    def parse(self, path: Union[str, Path]) -> List[Feature]:
        path = Path(path)
        logger.debug(f'parsing {path}')

        feature = parse_document(path, language=self.language)
        emit(feature, self, uri=path.as_posix())

        return self.specs

    # event sink

    def uri(self, uri: str) -> None:
        self.context.enter_document(uri)

    def eof(self) -> None:
        logger.debug(f'done with {self.context.uri}, {len(self.specs)} features built')

    def feature(self, feature: StatementRepr) -> None:
        current_feature = Feature.from_repr(feature, feature_type=self.feature_type, uri=self.context.uri)
        self.specs.append(current_feature)
        self.context.enter_feature(current_feature)
        logger.debug(f'feature "{current_feature.name}" at line {current_feature.line}')

    def scenario(self, scenario: StatementRepr) -> None:
        current_feature = self.context.require_feature('scenario')
        current_scenario = Scenario.from_repr(scenario)
        current_feature.scenarios.append(current_scenario)
        self.context.enter_container(current_scenario)

    def background(self, background: StatementRepr) -> None:
        current_feature = self.context.require_feature('background')
        current_background = Background.from_repr(background)
        current_feature.backgrounds.append(current_background)
        self.context.enter_container(current_background)

    def scenario_outline(self, scenario_outline: StatementRepr) -> None:
        self.context.require_feature('scenario outline')
        self.context.enter_container(ScenarioOutline.from_repr(scenario_outline))

    def step(self, step: StepRepr) -> None:
        container = self.context.require_container('step')
        container.steps.append(Step(keyword=step.keyword, name=step.name, line=step.line, args=step_args(step)))

    def examples(self, examples: ExamplesRepr) -> None:
        current_feature = self.context.require_feature('examples')
        outline = self.context.require_outline('examples')
        scenarios = expand(outline, rows_to_table(examples.rows))
        current_feature.scenarios.extend(scenarios)


def build(*paths: Union[str, Path], feature_type: str = DEFAULT_FEATURE_TYPE, language: Optional[str] = None) -> List[Feature]:
    builder = Builder(feature_type=feature_type, language=language)

    for path in paths:
        builder.parse(path)

    return builder.specs
