#!/usr/bin/env python3
"""
Match Engine - Score, filter and rank a candidate pool against a job requirement.

Entry points:
- MatchEngine.score_one(candidate, requirement) -> MatchResult
- MatchEngine.match_all(requirement, candidates, min_score, max_results) -> List[MatchResult]
- MatchEngine.bulk_match(requirements, candidates, ...) -> List[RequirementMatchSummary]
- matching_statistics(results) -> Dict

Every candidate evaluation is a pure function of (candidate, requirement), so
match_all may fan out over a thread pool without locking. The engine performs
no I/O; callers materialize records first.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging
import numpy as np

from talent_match.config_loader import EngineConfig, ResultPolicy, validate_engine_config
from talent_match.exceptions import ValidationError
from talent_match.matcher.location_resolver import LocationResolver
from talent_match.matcher.skill_matcher import SkillMatcher
from talent_match.models import (
    Candidate, JobRequirement, validate_candidate, validate_requirement
)
from talent_match.scorer.composite import calculate_composite_score
from talent_match.scorer.education import calculate_education_match
from talent_match.scorer.experience import calculate_experience_match
from talent_match.scorer.explainability import (
    generate_relevance_explanation, matched_skill_names
)
from talent_match.scorer.location import calculate_location_match
from talent_match.scorer.models import FIT_TIERS, MatchResult, RequirementMatchSummary
from talent_match.scorer.salary import calculate_salary_match
from talent_match.scorer.skills import calculate_skill_score
from talent_match.utils import round_half_up

logger = logging.getLogger(__name__)


def _apply_result_policy(
    results: List[MatchResult],
    policy: ResultPolicy
) -> List[MatchResult]:
    """Filter by min_score, sort descending (stable), truncate to max_results."""
    filtered = [r for r in results if r.overall_score >= policy.min_score]
    # sorted() is stable with reverse=True: ties keep input order
    ranked = sorted(filtered, key=lambda r: r.overall_score, reverse=True)
    return ranked[:policy.max_results]


def matching_statistics(results: Sequence[MatchResult]) -> Dict[str, Any]:
    """Summary counts per fit tier and the rounded average score."""
    scores = np.array([r.overall_score for r in results], dtype=np.float64)
    stats: Dict[str, Any] = {'total_candidates': len(results)}
    for tier in FIT_TIERS:
        stats[f'{tier}_matches'] = len([r for r in results if r.overall_fit == tier])
    stats['average_score'] = round_half_up(float(scores.mean())) if scores.size else 0
    return stats


class MatchEngine:
    """
    Candidate-requisition matching engine.

    Holds only immutable configuration and stateless helpers; a single
    instance can be shared across threads.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = validate_engine_config(config or EngineConfig())
        self.skill_matcher = SkillMatcher(self.config.skills.similarity_threshold)
        self.location_resolver = LocationResolver(default_country=self.config.default_country)

    def score_one(self, candidate: Candidate, requirement: JobRequirement) -> MatchResult:
        """
        Score one candidate against one requirement.

        Raises:
            ValidationError: malformed candidate or requirement
        """
        validate_requirement(requirement)
        validate_candidate(candidate)
        return self._score(candidate, requirement)

    def _score(self, candidate: Candidate, requirement: JobRequirement) -> MatchResult:
        skill_score = calculate_skill_score(
            candidate, requirement, self.skill_matcher, self.config.skills
        )
        experience_match = calculate_experience_match(candidate, requirement)
        location_match = calculate_location_match(candidate, requirement, self.location_resolver)
        education_match = calculate_education_match(candidate, requirement)
        salary_match = calculate_salary_match(candidate, requirement)

        composite = calculate_composite_score(
            {
                'skills': skill_score.score,
                'experience': experience_match.score,
                'location': location_match.score,
                'education': education_match.score,
                'salary': salary_match.score,
            },
            requirement.remote_work,
            self.config
        )

        explanation = generate_relevance_explanation(
            composite.overall_fit, skill_score, experience_match, location_match, education_match
        )

        logger.debug(f"Candidate {candidate.id} vs requirement {requirement.id}: "
                     f"{composite.overall_score} ({composite.overall_fit})")

        return MatchResult(
            candidate_id=candidate.id,
            overall_score=composite.overall_score,
            overall_fit=composite.overall_fit,
            skill_detail=skill_score,
            experience_match=experience_match,
            location_match=location_match,
            education_match=education_match,
            salary_match=salary_match,
            relevance_explanation=explanation,
            matched_skills=matched_skill_names(skill_score),
            weighted_score=composite.weighted_score,
            penalty=composite.penalty
        )

    def _score_or_skip(self, candidate: Candidate, requirement: JobRequirement) -> Optional[MatchResult]:
        try:
            validate_candidate(candidate)
        except ValidationError as e:
            logger.warning(f"Skipping candidate {candidate.id}: {e}")
            return None
        return self._score(candidate, requirement)

    def _score_pool(
        self,
        requirement: JobRequirement,
        candidates: Sequence[Candidate]
    ) -> Tuple[List[MatchResult], List[str]]:
        """Score every candidate in input order; returns (results, skipped candidate ids)."""
        validate_requirement(requirement)

        if self.config.max_workers > 1 and len(candidates) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                outcomes = list(executor.map(
                    lambda c: self._score_or_skip(c, requirement), candidates
                ))
        else:
            outcomes = [self._score_or_skip(c, requirement) for c in candidates]

        results = [r for r in outcomes if r is not None]
        skipped = [c.id for c, r in zip(candidates, outcomes) if r is None]
        return results, skipped

    def _resolve_policy(self, min_score: Optional[int], max_results: Optional[int]) -> ResultPolicy:
        policy = self.config.result_policy
        resolved = ResultPolicy(
            min_score=policy.min_score if min_score is None else min_score,
            max_results=policy.max_results if max_results is None else max_results
        )
        if resolved.max_results < 0:
            raise ValidationError(f"max_results must be >= 0, got {resolved.max_results}")
        return resolved

    def match_all(
        self,
        requirement: JobRequirement,
        candidates: Sequence[Candidate],
        min_score: Optional[int] = None,
        max_results: Optional[int] = None
    ) -> List[MatchResult]:
        """
        Score a candidate pool and return the ranked shortlist.

        Candidates failing validation are skipped and logged. Defaults for
        min_score (0) and max_results (50) come from the engine ResultPolicy.

        Args:
            requirement: Job requirement to match against
            candidates: Candidate pool
            min_score: Keep only results with overall_score >= min_score
            max_results: Maximum results to return

        Returns:
            MatchResults sorted by overall_score (highest first, ties in input order)

        Raises:
            ValidationError: malformed requirement or negative max_results
        """
        policy = self._resolve_policy(min_score, max_results)
        results, skipped = self._score_pool(requirement, candidates)
        ranked = _apply_result_policy(results, policy)

        logger.info(f"Requirement {requirement.id}: scored {len(results)} candidates "
                    f"({len(skipped)} skipped), returning {len(ranked)} "
                    f"(min_score={policy.min_score}, max_results={policy.max_results})")
        return ranked

    def bulk_match(
        self,
        requirements: Sequence[JobRequirement],
        candidates: Sequence[Candidate],
        min_score: Optional[int] = None,
        max_results: Optional[int] = None
    ) -> List[RequirementMatchSummary]:
        """
        Match the same candidate pool against several requirements.

        A requirement that fails validation produces a summary with `error`
        set instead of aborting the whole run.
        """
        policy = self._resolve_policy(min_score, max_results)
        summaries = []

        for requirement in requirements:
            try:
                results, skipped = self._score_pool(requirement, candidates)
            except ValidationError as e:
                logger.error(f"Error matching candidates for requirement {requirement.id}: {e}")
                summaries.append(RequirementMatchSummary(
                    requirement_id=requirement.id,
                    title=requirement.title,
                    error=str(e)
                ))
                continue

            summaries.append(RequirementMatchSummary(
                requirement_id=requirement.id,
                title=requirement.title,
                matches=tuple(_apply_result_policy(results, policy)),
                skipped_candidates=tuple(skipped)
            ))

        logger.info(f"Bulk matched {len(requirements)} requirements against {len(candidates)} candidates")
        return summaries
