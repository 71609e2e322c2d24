#!/usr/bin/env python3
"""
Location Scoring - Classify the candidate/job location relationship.

The first rule that applies wins:

    exact-city            100
    metro-area             95
    same-state             85
    preferred              90   candidate is in one of the job's preferred locations
    candidate-preference   85   job is in one of the candidate's preferred locations
    remote-friendly        70   job is remote or hybrid
    flexible               50
    nearby       max(40, 80 - hours * 5) from the travel-time table
    same-country           30
    no-match                0   relocation required
"""

from typing import Any, Dict, Tuple
import logging

from talent_match.matcher.location_resolver import LocationResolver, ParsedLocation
from talent_match.models import Candidate, JobRequirement
from talent_match.scorer.models import LocationMatch
from talent_match.utils import clamp_score, round_half_up

logger = logging.getLogger(__name__)


def _classify(
    candidate_loc: ParsedLocation,
    job_loc: ParsedLocation,
    candidate: Candidate,
    requirement: JobRequirement,
    resolver: LocationResolver
) -> Tuple[float, str, Dict[str, Any]]:
    if candidate_loc.city_key and candidate_loc.city_key == job_loc.city_key:
        return 100.0, 'exact-city', {'matched_city': job_loc.city}

    if resolver.same_metro_area(candidate_loc, job_loc):
        return 95.0, 'metro-area', {'metro_area': resolver.metro_area(job_loc)}

    if candidate_loc.state_key and candidate_loc.state_key == job_loc.state_key:
        return 85.0, 'same-state', {'matched_state': job_loc.state}

    for text in requirement.preferred_locations:
        if resolver.locations_match(candidate_loc, resolver.parse(text)):
            return 90.0, 'preferred', {'preferred_location': text}

    for text in candidate.preferred_locations:
        if resolver.locations_match(resolver.parse(text), job_loc):
            return 85.0, 'candidate-preference', {'candidate_prefers': text}

    if requirement.is_remote_friendly:
        return 70.0, 'remote-friendly', {'remote_work': requirement.remote_work}

    if requirement.remote_work == 'flexible':
        return 50.0, 'flexible', {'remote_work': requirement.remote_work}

    hours = resolver.travel_hours(candidate_loc, job_loc)
    if hours is not None:
        return max(40.0, 80 - hours * 5), 'nearby', {'distance_hours': hours}

    if candidate_loc.country_key and candidate_loc.country_key == job_loc.country_key:
        return 30.0, 'same-country', {'country': job_loc.country}

    return 0.0, 'no-match', {'requires_relocation': True}


def calculate_location_match(
    candidate: Candidate,
    requirement: JobRequirement,
    resolver: LocationResolver
) -> LocationMatch:
    """
    Calculate location match score.

    Returns: LocationMatch with score, tier and tier-specific details
    """
    candidate_loc = resolver.parse(candidate.current_location)
    job_loc = resolver.parse(requirement.job_location)

    raw_score, match_type, details = _classify(
        candidate_loc, job_loc, candidate, requirement, resolver
    )
    score = round_half_up(clamp_score(raw_score))

    logger.debug(
        f"Candidate {candidate.id}: location '{candidate.current_location}' vs "
        f"'{requirement.job_location}' -> {match_type} ({score})"
    )

    return LocationMatch(
        score=score,
        match_type=match_type,
        candidate_location=candidate.current_location,
        job_location=requirement.job_location,
        details=details
    )
