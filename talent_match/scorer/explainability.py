#!/usr/bin/env python3
"""
Explainability Module - Human-readable summary of why a candidate scored as it did.

Produces short clauses joined by periods, e.g.:

    Overall fit: excellent. Skills match: 3 required, 1 tech skills.
    Experience: perfect. Location: exact-city. Education: matches.
"""

from typing import List, Tuple

from talent_match.scorer.models import (
    EducationMatch, ExperienceMatch, LocationMatch, SkillScore
)

MAX_MATCHED_SKILLS = 5


def matched_skill_names(skill_score: SkillScore, limit: int = MAX_MATCHED_SKILLS) -> Tuple[str, ...]:
    """Names of matched skills with positive points, in match order."""
    names = [d.required_skill for d in skill_score.details if d.points > 0]
    return tuple(names[:limit])


def describe_skills(skill_score: SkillScore) -> str:
    required = skill_score.required_matched
    preferred = skill_score.preferred_matched
    technology = skill_score.technology_matched

    if required > 0:
        parts = [f"{required} required"]
        if preferred > 0:
            parts.append(f"{preferred} preferred")
        if technology > 0:
            parts.append(f"{technology} tech")
        return f"Skills match: {', '.join(parts)} skills"

    if preferred > 0 or technology > 0:
        return f"Skills match: {preferred + technology} bonus skills"

    return "Skills match: 0 skills"


def generate_relevance_explanation(
    overall_fit: str,
    skill_score: SkillScore,
    experience_match: ExperienceMatch,
    location_match: LocationMatch,
    education_match: EducationMatch
) -> str:
    reasons: List[str] = [f"Overall fit: {overall_fit}", describe_skills(skill_score)]

    if experience_match.match_type:
        reasons.append(f"Experience: {experience_match.match_type}")

    if location_match.match_type:
        reasons.append(f"Location: {location_match.match_type}")

    education_status = 'matches' if education_match.has_required_education else 'no-match'
    reasons.append(f"Education: {education_status}")

    return '. '.join(reasons) + '.'
