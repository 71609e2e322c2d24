#!/usr/bin/env python3
"""
Scoring Module - Rule-based sub-scores and the weighted composite.

- models.py: Data structures (SkillScore, ExperienceMatch, ..., MatchResult)
- skills.py: Required/preferred/technology skill score
- experience.py: Graduated experience band score
- location.py: Ten-tier location relationship score
- education.py: Degree-family education score
- salary.py: Compensation vs offered range score
- composite.py: Weighted blend, penalty gates, fit tier
- explainability.py: Human-readable relevance explanation
"""

from talent_match.scorer.models import MatchResult, SkillMatchDetail
from talent_match.scorer.composite import calculate_composite_score, classify_fit

__all__ = ['MatchResult', 'SkillMatchDetail', 'calculate_composite_score', 'classify_fit']
