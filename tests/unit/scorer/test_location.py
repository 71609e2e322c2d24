#!/usr/bin/env python3
"""
Unit tests for location tier scoring.
"""

import unittest

from talent_match.matcher.location_resolver import LocationResolver
from talent_match.scorer.location import calculate_location_match
from tests.fixtures.matching_fixtures import make_candidate, make_requirement


class TestLocationTiers(unittest.TestCase):

    def setUp(self):
        self.resolver = LocationResolver()

    def match(self, candidate_location, job_location, candidate_prefs=(), **requirement_fields):
        candidate = make_candidate(current_location=candidate_location,
                                   preferred_locations=tuple(candidate_prefs))
        requirement = make_requirement(job_location=job_location, **requirement_fields)
        return calculate_location_match(candidate, requirement, self.resolver)

    def test_exact_city(self):
        result = self.match("Noida", "Noida")
        self.assertEqual((result.score, result.match_type), (100, "exact-city"))
        self.assertEqual(result.details["matched_city"], "Noida")

    def test_exact_city_through_alias(self):
        result = self.match("Bengaluru, Karnataka", "Bangalore")
        self.assertEqual(result.match_type, "exact-city")

    def test_metro_area(self):
        result = self.match("Gurgaon", "Noida")
        self.assertEqual((result.score, result.match_type), (95, "metro-area"))
        self.assertEqual(result.details["metro_area"], "Delhi-NCR")

    def test_same_state(self):
        result = self.match("Lucknow", "Noida")
        self.assertEqual((result.score, result.match_type), (85, "same-state"))
        self.assertEqual(result.details["matched_state"], "Uttar Pradesh")

    def test_job_preferred_location(self):
        result = self.match("Pune", "Chennai", preferred_locations=("Pune",))
        self.assertEqual((result.score, result.match_type), (90, "preferred"))

    def test_candidate_preference(self):
        result = self.match("Pune", "Chennai", candidate_prefs=["Chennai"])
        self.assertEqual((result.score, result.match_type), (85, "candidate-preference"))
        self.assertEqual(result.details["candidate_prefers"], "Chennai")

    def test_candidate_preference_metro(self):
        result = self.match("Pune", "Noida", candidate_prefs=["Delhi"])
        self.assertEqual(result.match_type, "candidate-preference")

    def test_remote_friendly(self):
        for policy in ("remote", "hybrid"):
            result = self.match("Kolkata", "Chennai", remote_work=policy)
            self.assertEqual((result.score, result.match_type), (70, "remote-friendly"))

    def test_flexible(self):
        result = self.match("Kolkata", "Chennai", remote_work="flexible")
        self.assertEqual((result.score, result.match_type), (50, "flexible"))

    def test_nearby_uses_travel_time(self):
        result = self.match("Bangalore", "Chennai")
        # 80 - 6h * 5
        self.assertEqual((result.score, result.match_type), (50, "nearby"))
        self.assertEqual(result.details["distance_hours"], 6.0)

        result = self.match("Delhi", "Jaipur")
        self.assertEqual(result.score, 55)

    def test_same_country(self):
        result = self.match("Chennai", "Noida")
        self.assertEqual((result.score, result.match_type), (30, "same-country"))

    def test_no_match_requires_relocation(self):
        result = self.match("Springfield, Illinois, USA", "Noida")
        self.assertEqual((result.score, result.match_type), (0, "no-match"))
        self.assertTrue(result.details["requires_relocation"])

    def test_missing_candidate_location(self):
        result = self.match("", "Noida")
        self.assertEqual(result.match_type, "no-match")

    def test_tier_ordering(self):
        """Metro beats same-country; exact city beats metro."""
        exact = self.match("Noida", "Noida").score
        metro = self.match("Gurgaon", "Noida").score
        country = self.match("Chennai", "Noida").score
        self.assertGreater(exact, metro)
        self.assertGreater(metro, country)
