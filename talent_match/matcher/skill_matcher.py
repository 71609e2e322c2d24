#!/usr/bin/env python3
"""
Skill Matcher - Find the best candidate skill for one required skill.

Each candidate skill is classified into the first tier that applies:

    exact     100   identical normalized strings (returned immediately)
    synonym    95   members of the same synonym group
    category   80   same category (frontend, backend, database, ...)
    fuzzy     <=70  Jaro-Winkler similarity >= threshold, round(similarity * 70)
    partial    40   substring containment, both strings longer than 3 chars
    family     30   same technology family (jvm, microsoft, python, ...)

The highest-scoring candidate wins; on equal points the earlier one is kept.
Inputs are expected to be normalized already (see skill_normalizer).
"""

from dataclasses import dataclass
from typing import FrozenSet, Mapping, Optional, Sequence
import logging

import jellyfish

from talent_match.matcher.tables import CATEGORY_INDEX, FAMILY_INDEX, SYNONYM_INDEX
from talent_match.utils import round_half_up

logger = logging.getLogger(__name__)

EXACT_POINTS = 100
SYNONYM_POINTS = 95
CATEGORY_POINTS = 80
FUZZY_MAX_POINTS = 70
PARTIAL_POINTS = 40
FAMILY_POINTS = 30

PARTIAL_MIN_LENGTH = 3
DEFAULT_SIMILARITY_THRESHOLD = 0.6


@dataclass(frozen=True)
class SkillMatch:
    """Best match for a single required skill."""
    candidate_skill: str
    match_tier: str
    points: int
    similarity: float


def _share_group(skill_a: str, skill_b: str, index: Mapping[str, FrozenSet]) -> bool:
    groups_a = index.get(skill_a)
    groups_b = index.get(skill_b)
    if not groups_a or not groups_b:
        return False
    return not groups_a.isdisjoint(groups_b)


def string_similarity(skill_a: str, skill_b: str) -> float:
    """Jaro-Winkler similarity in [0, 1] between two skill strings."""
    if not skill_a or not skill_b:
        return 0.0
    return jellyfish.jaro_winkler_similarity(skill_a, skill_b)


class SkillMatcher:
    """Classify required/candidate skill pairs into match tiers."""

    def __init__(self, similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD):
        self.similarity_threshold = similarity_threshold

    def classify(self, required_skill: str, candidate_skill: str) -> Optional[SkillMatch]:
        """Return the tier for one pair, or None when nothing applies."""
        if not required_skill or not candidate_skill:
            return None

        if candidate_skill == required_skill:
            return SkillMatch(candidate_skill, 'exact', EXACT_POINTS, 1.0)

        if _share_group(required_skill, candidate_skill, SYNONYM_INDEX):
            return SkillMatch(candidate_skill, 'synonym', SYNONYM_POINTS, SYNONYM_POINTS / 100)

        if _share_group(required_skill, candidate_skill, CATEGORY_INDEX):
            return SkillMatch(candidate_skill, 'category', CATEGORY_POINTS, CATEGORY_POINTS / 100)

        similarity = string_similarity(required_skill, candidate_skill)
        if similarity >= self.similarity_threshold:
            points = round_half_up(similarity * FUZZY_MAX_POINTS)
            return SkillMatch(candidate_skill, 'fuzzy', points, similarity)

        contained = required_skill in candidate_skill or candidate_skill in required_skill
        if (contained and len(required_skill) > PARTIAL_MIN_LENGTH
                and len(candidate_skill) > PARTIAL_MIN_LENGTH):
            return SkillMatch(candidate_skill, 'partial', PARTIAL_POINTS, similarity)

        if _share_group(required_skill, candidate_skill, FAMILY_INDEX):
            return SkillMatch(candidate_skill, 'family', FAMILY_POINTS, similarity)

        return None

    def find_best_match(
        self,
        required_skill: str,
        candidate_skills: Sequence[str]
    ) -> Optional[SkillMatch]:
        """
        Find the single best candidate skill for a required skill.

        An exact match short-circuits the scan.

        Returns: SkillMatch or None if no tier applies to any candidate skill
        """
        best: Optional[SkillMatch] = None

        for candidate_skill in candidate_skills:
            match = self.classify(required_skill, candidate_skill)
            if match is None:
                continue
            if match.match_tier == 'exact':
                return match
            if best is None or match.points > best.points:
                best = match

        if best is not None:
            logger.debug(f"'{required_skill}' best match '{best.candidate_skill}' ({best.match_tier}, {best.points})")
        return best
