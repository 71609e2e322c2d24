#!/usr/bin/env python3
"""
Experience Scoring - Graduated scoring of candidate years against a [min, max] band.

Bands are evaluated in order (effective_max = max or 2 * min):

    no-requirement   min == 0 and no max                      50
    perfect          min <= years <= max                      100
    excellent        [0.9 * min, 1.1 * effective_max]         90
    good             [0.8 * min, 1.3 * effective_max]         75
    acceptable       [0.6 * min, 1.5 * (max or 3 * min)]      60
    over-qualified   years > effective_max      max(30, 100 - (ratio - 1) * 40)
    under-qualified  years < 0.6 * min          max(20, years / min * 80)
    close            anything else                            65
"""

from typing import Optional
import logging

from talent_match.models import Candidate, JobRequirement
from talent_match.scorer.models import ExperienceMatch
from talent_match.utils import clamp_score, round_half_up

logger = logging.getLogger(__name__)


def experience_level(years: float) -> str:
    """Seniority label for a number of years of experience."""
    if years < 1:
        return 'entry'
    if years < 3:
        return 'junior'
    if years < 5:
        return 'mid'
    if years < 8:
        return 'senior'
    if years < 12:
        return 'lead'
    if years < 15:
        return 'principal'
    return 'expert'


def score_experience_band(years: float, min_years: float, max_years: Optional[float]):
    """
    Score decimal years against the band.

    Returns: (score, match_type) with score not yet rounded
    """
    if min_years == 0 and max_years is None:
        return 50.0, 'no-requirement'

    if years >= min_years and (max_years is None or years <= max_years):
        return 100.0, 'perfect'

    effective_max = max_years if max_years is not None else min_years * 2
    acceptable_max = max_years if max_years is not None else min_years * 3

    if min_years * 0.9 <= years <= effective_max * 1.1:
        return 90.0, 'excellent'
    if min_years * 0.8 <= years <= effective_max * 1.3:
        return 75.0, 'good'
    if min_years * 0.6 <= years <= acceptable_max * 1.5:
        return 60.0, 'acceptable'

    if years > effective_max:
        if effective_max <= 0:
            return 30.0, 'over-qualified'
        ratio = years / effective_max
        return max(30.0, 100 - (ratio - 1) * 40), 'over-qualified'

    if years < min_years * 0.6:
        return max(20.0, (years / min_years) * 80), 'under-qualified'

    return 65.0, 'close'


def calculate_experience_match(
    candidate: Candidate,
    requirement: JobRequirement
) -> ExperienceMatch:
    """Score the candidate's total experience against the requirement band."""
    years = candidate.experience.total_years
    band = requirement.experience_required

    raw_score, match_type = score_experience_band(years, band.min_years, band.max_years)
    score = round_half_up(clamp_score(raw_score))

    logger.debug(f"Candidate {candidate.id}: {years:.2f} years vs [{band.min_years}, {band.max_years}] -> {match_type} ({score})")

    return ExperienceMatch(
        score=score,
        match_type=match_type,
        candidate_years=round(years, 2),
        required_min=band.min_years,
        required_max=band.max_years,
        experience_level=experience_level(years)
    )
