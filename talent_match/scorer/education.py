#!/usr/bin/env python3
"""
Education Scoring - Match candidate degrees against required degrees.

A requirement is satisfied by any candidate entry whose degree is the same
or in the same degree family (b.tech ~ bachelor ~ b.sc) and whose
specialization contains, or is contained in, the required one.
"""

import logging
import re

from talent_match.matcher.tables import DEGREE_FAMILY_INDEX
from talent_match.models import Candidate, Education, EducationRequirement, JobRequirement
from talent_match.scorer.models import EducationMatch
from talent_match.utils import round_half_up

logger = logging.getLogger(__name__)

_NON_LETTER_RE = re.compile(r'[^a-z]')


def normalize_degree(degree: str) -> str:
    """'B.Tech' -> 'btech', 'Bachelor of Science' -> 'bachelorofscience'."""
    return _NON_LETTER_RE.sub('', (degree or '').lower())


def is_degree_match(candidate_degree: str, required_degree: str) -> bool:
    candidate_key = normalize_degree(candidate_degree)
    required_key = normalize_degree(required_degree)
    if not candidate_key or not required_key:
        return False
    if candidate_key == required_key:
        return True

    candidate_families = DEGREE_FAMILY_INDEX.get(candidate_key)
    required_families = DEGREE_FAMILY_INDEX.get(required_key)
    if not candidate_families or not required_families:
        return False
    return not candidate_families.isdisjoint(required_families)


def is_specialization_match(candidate_spec: str, required_spec: str) -> bool:
    required = (required_spec or '').strip().lower()
    if not required:
        return True
    candidate = (candidate_spec or '').strip().lower()
    if not candidate:
        return False
    return required in candidate or candidate in required


def matches_requirement(education: Education, required: EducationRequirement) -> bool:
    return (is_degree_match(education.degree, required.degree)
            and is_specialization_match(education.specialization, required.specialization))


def calculate_education_match(
    candidate: Candidate,
    requirement: JobRequirement
) -> EducationMatch:
    """Score = round(100 * satisfied requirements / total requirements)."""
    candidate_degrees = tuple(edu.degree for edu in candidate.education)
    required = requirement.education_requirements

    if not required:
        return EducationMatch(
            score=100,
            match_type='no-requirement',
            has_required_education=True,
            candidate_degrees=candidate_degrees
        )

    matched_count = 0
    mandatory_missing = []
    for req in required:
        if any(matches_requirement(edu, req) for edu in candidate.education):
            matched_count += 1
        elif req.is_mandatory:
            mandatory_missing.append(req.degree)

    score = round_half_up(100 * matched_count / len(required))
    has_required = matched_count == len(required)

    if mandatory_missing:
        logger.debug(f"Candidate {candidate.id}: missing mandatory education {mandatory_missing}")

    return EducationMatch(
        score=score,
        match_type='matches' if has_required else ('partial' if matched_count else 'no-match'),
        has_required_education=has_required,
        matched_count=matched_count,
        total_required=len(required),
        mandatory_missing=tuple(mandatory_missing),
        candidate_degrees=candidate_degrees
    )
