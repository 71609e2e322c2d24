"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For record builders, see tests/fixtures/matching_fixtures.py
"""

import pytest

from talent_match.config_loader import EngineConfig
from talent_match.engine import MatchEngine
from talent_match.matcher.location_resolver import LocationResolver
from talent_match.matcher.skill_matcher import SkillMatcher
from tests.fixtures.matching_fixtures import make_candidate, make_requirement


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end matching scenarios over the public engine API"
    )


@pytest.fixture
def engine_config():
    return EngineConfig()


@pytest.fixture
def engine(engine_config):
    return MatchEngine(engine_config)


@pytest.fixture
def skill_matcher():
    return SkillMatcher()


@pytest.fixture
def resolver():
    return LocationResolver()


@pytest.fixture
def backend_requirement():
    """Java backend role in Noida, 3-8 years."""
    return make_requirement()


@pytest.fixture
def strong_candidate():
    return make_candidate()
