#!/usr/bin/env python3
"""
Skill Scoring - Aggregate per-skill matches into one 0-100 skill score.

Points:
- required skills: the matched tier's points (max 100 each); the only
  component counted in the denominator
- preferred skills not already matched: exact 50, synonym/category 35,
  anything else 20 (bonus, outside the denominator)
- declared technologies the candidate lists: flat technology_bonus each

score = min(100, round(100 * points / (required_count * 100)))
"""

from typing import List, Optional
import logging

from talent_match.config_loader import SkillMatchConfig
from talent_match.matcher.skill_matcher import EXACT_POINTS, SkillMatcher
from talent_match.matcher.skill_normalizer import normalize_skills
from talent_match.models import Candidate, JobRequirement
from talent_match.scorer.models import SkillMatchDetail, SkillScore
from talent_match.utils import round_half_up

logger = logging.getLogger(__name__)

PREFERRED_POINTS = {
    'exact': 50,
    'synonym': 35,
    'category': 35,
}
PREFERRED_DEFAULT_POINTS = 20


def calculate_skill_score(
    candidate: Candidate,
    requirement: JobRequirement,
    matcher: SkillMatcher,
    config: Optional[SkillMatchConfig] = None
) -> SkillScore:
    """
    Score candidate skills against required, preferred and technology lists.

    Args:
        candidate: Candidate being scored
        requirement: Job requirement with skill lists
        matcher: SkillMatcher used for tier classification
        config: SkillMatchConfig (technology bonus, empty-requirements policy)

    Returns:
        SkillScore with score, per-category match counts and details
    """
    config = config or SkillMatchConfig()

    candidate_skills = normalize_skills(candidate.skills)
    required_skills = normalize_skills(requirement.required_skills)
    preferred_skills = normalize_skills(requirement.preferred_skills)
    technologies = normalize_skills(requirement.technologies)

    details: List[SkillMatchDetail] = []
    matched_names = set()
    total_points = 0
    max_possible = len(required_skills) * EXACT_POINTS

    for required_skill in required_skills:
        match = matcher.find_best_match(required_skill, candidate_skills)
        if match is None:
            continue
        total_points += match.points
        matched_names.add(required_skill)
        details.append(SkillMatchDetail(
            required_skill=required_skill,
            candidate_skill=match.candidate_skill,
            match_tier=match.match_tier,
            points=match.points
        ))

    for preferred_skill in preferred_skills:
        if preferred_skill in matched_names:
            continue
        match = matcher.find_best_match(preferred_skill, candidate_skills)
        if match is None:
            continue
        points = PREFERRED_POINTS.get(match.match_tier, PREFERRED_DEFAULT_POINTS)
        total_points += points
        matched_names.add(preferred_skill)
        details.append(SkillMatchDetail(
            required_skill=preferred_skill,
            candidate_skill=match.candidate_skill,
            match_tier=match.match_tier,
            points=points,
            is_preferred=True
        ))

    candidate_skill_set = set(candidate_skills)
    for tech in technologies:
        if tech in candidate_skill_set:
            total_points += config.technology_bonus
            details.append(SkillMatchDetail(
                required_skill=tech,
                candidate_skill=tech,
                match_tier='exact',
                points=config.technology_bonus,
                is_technology=True
            ))

    if max_possible > 0:
        score = min(100, round_half_up(100 * total_points / max_possible))
    else:
        score = config.empty_requirements_score

    required_matched = len([d for d in details if not d.is_preferred and not d.is_technology])
    preferred_matched = len([d for d in details if d.is_preferred])
    technology_matched = len([d for d in details if d.is_technology])

    logger.debug(
        f"Candidate {candidate.id}: skill score {score} "
        f"({required_matched}/{len(required_skills)} required, "
        f"{preferred_matched} preferred, {technology_matched} tech)"
    )

    return SkillScore(
        score=score,
        required_total=len(required_skills),
        required_matched=required_matched,
        preferred_matched=preferred_matched,
        technology_matched=technology_matched,
        details=tuple(details)
    )
