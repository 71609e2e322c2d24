#!/usr/bin/env python3
"""
Unit tests for the composite score, penalty gates and fit tiers.
"""

import unittest

from talent_match.config_loader import EngineConfig, FitThresholds, MatchWeights
from talent_match.scorer.composite import (
    calculate_composite_score, classify_fit, select_penalty_gate, weighted_base_score
)


def sub_scores(**overrides):
    scores = {'skills': 100, 'experience': 100, 'location': 100, 'education': 100, 'salary': 100}
    scores.update(overrides)
    return scores


class TestCompositeScore(unittest.TestCase):

    def test_01_perfect_scores(self):
        result = calculate_composite_score(sub_scores(), 'on-site')
        self.assertEqual(result.overall_score, 100)
        self.assertEqual(result.overall_fit, 'excellent')
        self.assertIsNone(result.penalty)

    def test_02_skills_gate(self):
        """Skills 40: 18 + 25 + 15 + 10 + 5 = 73, x0.70 = 51."""
        print("\n📊 UNIT Test 2: Skills Penalty Gate")

        result = calculate_composite_score(sub_scores(skills=40), 'on-site')

        self.assertEqual(result.weighted_score, 73)
        self.assertEqual(result.overall_score, 51)
        self.assertEqual(result.penalty['type'], 'skills_below_threshold')
        self.assertEqual(result.penalty['multiplier'], 0.70)
        self.assertEqual(result.overall_fit, 'poor')

        print(f"  ✓ {result.weighted_score} -> {result.overall_score}")

    def test_03_experience_gate(self):
        # 45 + 5 + 15 + 10 + 5 = 80, x0.80 = 64
        result = calculate_composite_score(sub_scores(experience=20), 'on-site')
        self.assertEqual(result.overall_score, 64)
        self.assertEqual(result.penalty['type'], 'experience_below_threshold')
        self.assertEqual(result.overall_fit, 'average')

    def test_04_location_gate_on_site(self):
        # 45 + 25 + 3 + 10 + 5 = 88, x0.90 = 79
        result = calculate_composite_score(sub_scores(location=20), 'on-site')
        self.assertEqual(result.weighted_score, 88)
        self.assertEqual(result.overall_score, 79)
        self.assertEqual(result.penalty['type'], 'location_mismatch')
        self.assertEqual(result.overall_fit, 'good')

    def test_05_location_gate_skipped_for_remote_and_hybrid(self):
        for policy in ('remote', 'hybrid'):
            result = calculate_composite_score(sub_scores(location=20), policy)
            self.assertIsNone(result.penalty)
            self.assertEqual(result.overall_score, 88)

    def test_06_location_gate_applies_to_flexible(self):
        result = calculate_composite_score(sub_scores(location=20), 'flexible')
        self.assertEqual(result.penalty['type'], 'location_mismatch')

    def test_07_only_first_gate_applies(self):
        # 18 + 5 + 15 + 10 + 5 = 53, x0.70 only
        result = calculate_composite_score(sub_scores(skills=40, experience=20, location=0), 'on-site')
        self.assertEqual(result.penalty['type'], 'skills_below_threshold')
        self.assertEqual(result.weighted_score, 53 - 15)
        self.assertEqual(result.overall_score, 27)

    def test_08_gate_threshold_is_strict(self):
        result = calculate_composite_score(sub_scores(skills=60), 'on-site')
        self.assertIsNone(result.penalty)

    def test_09_out_of_range_sub_scores_clamped(self):
        result = calculate_composite_score(sub_scores(skills=150, salary=-10), 'on-site')
        # 45 + 25 + 15 + 10 + 0
        self.assertEqual(result.overall_score, 95)
        self.assertEqual(result.components['salary']['score'], 0.0)

    def test_10_all_zero(self):
        result = calculate_composite_score(
            sub_scores(skills=0, experience=0, location=0, education=0, salary=0), 'on-site'
        )
        self.assertEqual(result.overall_score, 0)
        self.assertEqual(result.overall_fit, 'poor')

    def test_11_custom_weights(self):
        config = EngineConfig(weights=MatchWeights(
            skills=1.0, experience=0.0, location=0.0, education=0.0, salary=0.0
        ))
        result = calculate_composite_score(sub_scores(experience=0), 'remote', config)
        self.assertEqual(result.weighted_score, 100)
        # experience gate still fires on the sub-score
        self.assertEqual(result.overall_score, 80)


class TestPenaltyAndFit(unittest.TestCase):

    def test_select_penalty_gate_none(self):
        self.assertIsNone(select_penalty_gate(sub_scores(), 'on-site', EngineConfig().penalties))

    def test_weighted_base_components(self):
        weighted, components = weighted_base_score(sub_scores(location=20), EngineConfig())
        self.assertEqual(weighted, 88)
        self.assertAlmostEqual(components['location']['contribution'], 3.0)
        self.assertAlmostEqual(components['skills']['weight'], 0.45)

    def test_classify_fit_boundaries(self):
        self.assertEqual(classify_fit(100), 'excellent')
        self.assertEqual(classify_fit(85), 'excellent')
        self.assertEqual(classify_fit(84), 'good')
        self.assertEqual(classify_fit(70), 'good')
        self.assertEqual(classify_fit(69), 'average')
        self.assertEqual(classify_fit(55), 'average')
        self.assertEqual(classify_fit(54), 'poor')
        self.assertEqual(classify_fit(0), 'poor')

    def test_classify_fit_custom_thresholds(self):
        thresholds = FitThresholds(excellent=90, good=80, average=60)
        self.assertEqual(classify_fit(85, thresholds), 'good')
