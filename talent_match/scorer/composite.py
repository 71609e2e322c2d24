#!/usr/bin/env python3
"""
Composite Scoring - Weighted blend of the five sub-scores.

1. Clamp every sub-score to [0, 100] and take the weighted sum
   (skills .45, experience .25, location .15, education .10, salary .05),
   rounded to the weighted base score.
2. Apply at most one penalty gate, first match wins:
   skills < 60 -> x0.70; experience < 40 -> x0.80;
   location < 50 on a job that is not remote/hybrid -> x0.90.
3. Clamp to [0, 100] and classify the fit tier.
"""

from typing import Any, Dict, Optional, Tuple
import logging
import numpy as np

from talent_match.config_loader import EngineConfig, FitThresholds, PenaltyGates
from talent_match.models import REMOTE_FRIENDLY_POLICIES
from talent_match.scorer.models import CompositeScore
from talent_match.utils import round_half_up

logger = logging.getLogger(__name__)

SUB_SCORE_KEYS = ["skills", "experience", "location", "education", "salary"]


def classify_fit(overall_score: int, thresholds: Optional[FitThresholds] = None) -> str:
    thresholds = thresholds or FitThresholds()
    if overall_score >= thresholds.excellent:
        return 'excellent'
    if overall_score >= thresholds.good:
        return 'good'
    if overall_score >= thresholds.average:
        return 'average'
    return 'poor'


def select_penalty_gate(
    sub_scores: Dict[str, float],
    remote_work: str,
    gates: PenaltyGates
) -> Optional[Dict[str, Any]]:
    """
    Pick the single penalty gate that applies, if any.

    Returns: penalty detail dict ({type, multiplier, reason}) or None
    """
    if sub_scores['skills'] < gates.skills.threshold:
        return {
            'type': 'skills_below_threshold',
            'multiplier': gates.skills.multiplier,
            'reason': f"Skill score {sub_scores['skills']:.0f} below {gates.skills.threshold:.0f}"
        }

    if sub_scores['experience'] < gates.experience.threshold:
        return {
            'type': 'experience_below_threshold',
            'multiplier': gates.experience.multiplier,
            'reason': f"Experience score {sub_scores['experience']:.0f} below {gates.experience.threshold:.0f}"
        }

    if (sub_scores['location'] < gates.location.threshold
            and remote_work not in REMOTE_FRIENDLY_POLICIES):
        return {
            'type': 'location_mismatch',
            'multiplier': gates.location.multiplier,
            'reason': f"Location score {sub_scores['location']:.0f} below {gates.location.threshold:.0f} "
                      f"and job is {remote_work}"
        }

    return None


def weighted_base_score(sub_scores: Dict[str, float], config: EngineConfig) -> Tuple[int, Dict[str, Any]]:
    """Weighted sum of clamped sub-scores, rounded; also returns per-key contributions."""
    w = config.weights.model_dump()
    weights = np.array([float(w[k]) for k in SUB_SCORE_KEYS], dtype=np.float64)
    scores = np.clip(
        np.array([float(sub_scores.get(k, 0.0)) for k in SUB_SCORE_KEYS], dtype=np.float64),
        0.0, 100.0
    )

    contributions = scores * weights
    weighted = round_half_up(float(contributions.sum()))

    components = {
        k: {
            "score": float(s),
            "weight": float(wt),
            "contribution": float(c),
        }
        for k, s, wt, c in zip(SUB_SCORE_KEYS, scores.tolist(), weights.tolist(), contributions.tolist())
    }
    return weighted, components


def calculate_composite_score(
    sub_scores: Dict[str, float],
    remote_work: str,
    config: Optional[EngineConfig] = None
) -> CompositeScore:
    """
    Combine sub-scores into the overall score and fit tier.

    Args:
        sub_scores: Dict with skills/experience/location/education/salary scores (0-100)
        remote_work: Job remote policy (on-site|remote|hybrid|flexible)
        config: EngineConfig with weights, penalty gates and fit thresholds

    Returns:
        CompositeScore with weighted (pre-penalty) and overall (post-penalty) scores
    """
    config = config or EngineConfig()
    clamped = {k: max(0.0, min(100.0, float(sub_scores.get(k, 0.0)))) for k in SUB_SCORE_KEYS}

    weighted, components = weighted_base_score(clamped, config)

    overall = weighted
    penalty = select_penalty_gate(clamped, remote_work, config.penalties)
    if penalty:
        overall = round_half_up(weighted * penalty['multiplier'])

    overall = max(0, min(100, overall))
    fit = classify_fit(overall, config.fit_thresholds)

    logger.debug(f"Composite: weighted={weighted}, overall={overall}, fit={fit}, penalty={penalty['type'] if penalty else None}")

    return CompositeScore(
        weighted_score=weighted,
        overall_score=overall,
        overall_fit=fit,
        penalty=penalty,
        components=components
    )
