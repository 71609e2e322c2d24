"""Candidate-requisition matching engine."""
from talent_match.engine import MatchEngine, matching_statistics
from talent_match.exceptions import ConfigurationError, MatchingException, ValidationError
from talent_match.models import Candidate, JobRequirement
from talent_match.scorer.models import MatchResult

__all__ = [
    'MatchEngine', 'matching_statistics',
    'Candidate', 'JobRequirement', 'MatchResult',
    'MatchingException', 'ValidationError', 'ConfigurationError'
]
