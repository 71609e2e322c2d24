#!/usr/bin/env python3
"""
Scoring Models - Data structures for sub-scores and match results.

Every structure is frozen: results are created fresh per scoring call and
never mutated afterwards.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from talent_match.utils import freeze_mapping, to_native_types

MATCH_TIERS = ('exact', 'synonym', 'category', 'fuzzy', 'partial', 'family')
FIT_TIERS = ('excellent', 'good', 'average', 'poor')


@dataclass(frozen=True)
class SkillMatchDetail:
    """One matched (required/preferred/technology skill, candidate skill) pair."""
    required_skill: str
    candidate_skill: str
    match_tier: str
    points: int
    is_preferred: bool = False
    is_technology: bool = False

    def __post_init__(self):
        if self.match_tier not in MATCH_TIERS:
            raise ValueError(f"Unknown match tier '{self.match_tier}', expected one of {MATCH_TIERS}")


@dataclass(frozen=True)
class SkillScore:
    score: int
    required_total: int = 0
    required_matched: int = 0
    preferred_matched: int = 0
    technology_matched: int = 0
    details: Tuple[SkillMatchDetail, ...] = ()

    @property
    def total_matched(self) -> int:
        return len(self.details)


@dataclass(frozen=True)
class ExperienceMatch:
    score: int
    match_type: str
    candidate_years: float
    required_min: float
    required_max: Optional[float]
    experience_level: str


@dataclass(frozen=True)
class LocationMatch:
    score: int
    match_type: str
    candidate_location: str
    job_location: str
    details: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'details', freeze_mapping(self.details))


@dataclass(frozen=True)
class EducationMatch:
    score: int
    match_type: str
    has_required_education: bool
    matched_count: int = 0
    total_required: int = 0
    mandatory_missing: Tuple[str, ...] = ()
    candidate_degrees: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SalaryMatch:
    score: int
    match_type: str
    candidate_ctc: Optional[float]
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class CompositeScore:
    """Weighted composite before and after the penalty gate."""
    weighted_score: int
    overall_score: int
    overall_fit: str
    penalty: Optional[Mapping[str, Any]] = None
    components: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'penalty', freeze_mapping(self.penalty))
        object.__setattr__(self, 'components', freeze_mapping(self.components))


@dataclass(frozen=True)
class MatchResult:
    """Complete scored match for one candidate against one requirement."""
    candidate_id: str
    overall_score: int
    overall_fit: str
    skill_detail: SkillScore
    experience_match: ExperienceMatch
    location_match: LocationMatch
    education_match: EducationMatch
    salary_match: SalaryMatch
    relevance_explanation: str = ''
    matched_skills: Tuple[str, ...] = ()
    weighted_score: int = 0
    penalty: Optional[Mapping[str, Any]] = None

    def __post_init__(self):
        object.__setattr__(self, 'penalty', freeze_mapping(self.penalty))

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe representation for API serialization or persistence."""
        data = to_native_types(self)
        data['skill_detail']['total_matched'] = self.skill_detail.total_matched
        return data


@dataclass(frozen=True)
class RequirementMatchSummary:
    """Outcome of matching the candidate pool against one requirement in a bulk run."""
    requirement_id: str
    title: str
    matches: Tuple[MatchResult, ...] = ()
    skipped_candidates: Tuple[str, ...] = ()
    error: Optional[str] = None

    @property
    def total_matches(self) -> int:
        return len(self.matches)

    @property
    def excellent_matches(self) -> int:
        return len([m for m in self.matches if m.overall_fit == 'excellent'])

    @property
    def good_matches(self) -> int:
        return len([m for m in self.matches if m.overall_fit == 'good'])
