from typing import Generator

import pytest

from .fixtures import FeatureFixture


def _feature_fixture() -> Generator[FeatureFixture, None, None]:
    with FeatureFixture() as fixture:
        yield fixture


feature_fixture = pytest.fixture(scope='function')(_feature_fixture)

WIDGETS_FEATURE = '''
@smoke @regression
Feature: Widgets
    Background: stock
        Given an empty store

    Scenario: add widgets
        Given I have 3 widgets
        When I add
            """
            hello
            """
        Then the table is
            | a | b |
            | 1 | 2 |

    @outline
    Scenario Outline: count widgets
        Given I have <n> widgets
        Then the doc is
            """
            n=<n>
            """

        Examples:
            | n |
            | 3 |
            | 5 |
'''
