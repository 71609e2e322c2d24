#!/usr/bin/env python3
"""
Unit tests for experience band scoring.
"""

import pytest

from talent_match.models import Experience, ExperienceBand
from talent_match.scorer.experience import (
    calculate_experience_match, experience_level, score_experience_band
)
from tests.fixtures.matching_fixtures import make_candidate, make_requirement


@pytest.mark.parametrize("years, expected_score, expected_type", [
    (3, 100, "perfect"),
    (5, 100, "perfect"),
    (8, 100, "perfect"),
    (2.8, 90, "excellent"),
    (8.5, 90, "excellent"),
    (2.5, 75, "good"),
    (2.0, 60, "acceptable"),
    (13, 75, "over-qualified"),
    (20, 40, "over-qualified"),
    (30, 30, "over-qualified"),
    (0.5, 20, "under-qualified"),
])
def test_band_3_to_8(years, expected_score, expected_type):
    score, match_type = score_experience_band(years, 3, 8)
    assert match_type == expected_type
    assert round(score) == expected_score


def test_no_requirement():
    assert score_experience_band(4, 0, None) == (50.0, "no-requirement")


def test_unbounded_max():
    assert score_experience_band(25, 3, None) == (100.0, "perfect")


def test_zero_max_is_a_real_bound():
    score, match_type = score_experience_band(2, 0, 0)
    assert match_type == "over-qualified"
    assert score == 30.0


def test_zero_band_zero_years():
    assert score_experience_band(0, 0, 2) == (100.0, "perfect")


def test_months_count_toward_total():
    candidate = make_candidate(experience=Experience(years=2, months=9))
    result = calculate_experience_match(candidate, make_requirement())
    assert result.match_type == "excellent"
    assert result.candidate_years == 2.75


def test_under_qualified_is_rounded():
    candidate = make_candidate(experience=Experience(years=1))
    result = calculate_experience_match(candidate, make_requirement())
    # 1 / 3 * 80
    assert result.score == 27
    assert result.match_type == "under-qualified"
    assert result.experience_level == "junior"


def test_match_carries_band():
    requirement = make_requirement(experience_required=ExperienceBand(min_years=2, max_years=None))
    result = calculate_experience_match(make_candidate(), requirement)
    assert result.required_min == 2
    assert result.required_max is None
    assert result.score == 100


@pytest.mark.parametrize("years, level", [
    (0.5, "entry"),
    (2, "junior"),
    (4, "mid"),
    (5, "senior"),
    (10, "lead"),
    (13, "principal"),
    (20, "expert"),
])
def test_experience_level(years, level):
    assert experience_level(years) == level
