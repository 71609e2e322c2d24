#!/usr/bin/env python3
"""
Salary Scoring - Candidate compensation against the offered range.

The candidate figure is expected CTC, falling back to current CTC.
A candidate below the budget is rewarded; above it decays to a floor of 20.
"""

import logging

from talent_match.models import Candidate, JobRequirement
from talent_match.scorer.models import SalaryMatch
from talent_match.utils import clamp_score, round_half_up

logger = logging.getLogger(__name__)


def candidate_ctc(candidate: Candidate):
    """Compensation figure used for scoring, or None when unknown."""
    for value in (candidate.expected_ctc, candidate.current_ctc):
        if value is not None and value > 0:
            return value
    return None


def calculate_salary_match(candidate: Candidate, requirement: JobRequirement) -> SalaryMatch:
    ctc = candidate_ctc(candidate)
    salary_range = requirement.salary_range

    if ctc is None or salary_range is None or salary_range.max <= 0:
        return SalaryMatch(
            score=50,
            match_type='unknown',
            candidate_ctc=ctc,
            salary_min=salary_range.min if salary_range else None,
            salary_max=salary_range.max if salary_range else None,
            currency=salary_range.currency if salary_range else None
        )

    low, high = salary_range.min, salary_range.max

    if low <= ctc <= high:
        raw_score, match_type = 100.0, 'perfect'
    elif ctc > high:
        over_by = (ctc - high) / high
        raw_score, match_type = max(20.0, 100 - over_by * 50), 'over-expectation'
    else:
        under_by = (low - ctc) / low
        raw_score, match_type = min(100.0, 80 + under_by * 20), 'under-expectation'

    score = round_half_up(clamp_score(raw_score))
    logger.debug(f"Candidate {candidate.id}: CTC {ctc} vs [{low}, {high}] -> {match_type} ({score})")

    return SalaryMatch(
        score=score,
        match_type=match_type,
        candidate_ctc=ctc,
        salary_min=low,
        salary_max=high,
        currency=salary_range.currency
    )
