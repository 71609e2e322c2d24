"""Matcher Module - Skill and location normalization and tier classification."""
from talent_match.matcher.skill_normalizer import normalize_skill, normalize_skills
from talent_match.matcher.skill_matcher import SkillMatcher, SkillMatch
from talent_match.matcher.location_resolver import (
    LocationResolver, ParsedLocation, normalize_location_name
)

__all__ = [
    'normalize_skill', 'normalize_skills', 'SkillMatcher', 'SkillMatch',
    'LocationResolver', 'ParsedLocation', 'normalize_location_name'
]
