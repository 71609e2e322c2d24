#!/usr/bin/env python3
"""
Unit tests for the frozen scoring result structures.
"""

import pytest

from talent_match.scorer.models import (
    MATCH_TIERS, CompositeScore, LocationMatch, SkillMatchDetail
)


@pytest.mark.parametrize("tier", MATCH_TIERS)
def test_known_match_tiers_accepted(tier):
    assert SkillMatchDetail("java", "java", tier, 50).match_tier == tier


def test_unknown_match_tier_rejected():
    with pytest.raises(ValueError):
        SkillMatchDetail("java", "java", "approximate", 50)


def test_location_details_read_only():
    match = LocationMatch(score=90, match_type="metro_area", candidate_location="Noida",
                          job_location="Delhi", details={"metro_area": "Delhi-NCR"})
    assert match.details["metro_area"] == "Delhi-NCR"
    with pytest.raises(TypeError):
        match.details["metro_area"] = "Mumbai"


def test_composite_penalty_and_components_read_only():
    composite = CompositeScore(
        weighted_score=50, overall_score=35, overall_fit="poor",
        penalty={"type": "skills_below_threshold", "multiplier": 0.7},
        components={"skills": {"score": 40.0, "weight": 0.45, "contribution": 18.0}},
    )
    with pytest.raises(TypeError):
        composite.penalty["multiplier"] = 1.0
    with pytest.raises(TypeError):
        composite.components["skills"]["score"] = 100.0
    assert composite.components["skills"] == {"score": 40.0, "weight": 0.45, "contribution": 18.0}


def test_no_penalty_stays_none():
    assert CompositeScore(weighted_score=80, overall_score=80, overall_fit="good").penalty is None
