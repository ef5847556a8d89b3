#!/usr/bin/env python3
"""
Test suite for industry weighting, overall aggregation, completeness and confidence.
"""

import unittest

from readiness.config_loader import CategoryWeights, ConfidenceThresholds, ScorerConfig
from readiness.scorer.completeness import calculate_data_completeness, determine_confidence
from readiness.scorer.models import Confidence, Impact, ScoreCategory
from readiness.scorer.weights import (
    apply_weights,
    calculate_overall_score,
    resolve_industry_weights,
    weighting_factor,
)
from tests import make_profile


class TestIndustryWeights(unittest.TestCase):

    def test_default_weights(self):
        weights, key = resolve_industry_weights("Retail")
        self.assertIsNone(key)
        self.assertTrue(all(w == 1.0 for w in weights.values()))
        self.assertEqual(len(weights), 7)

    def test_absent_industry(self):
        weights, key = resolve_industry_weights(None)
        self.assertIsNone(key)

    def test_substring_match(self):
        weights, key = resolve_industry_weights("Healthcare Services")
        self.assertEqual(key, "healthcare")
        self.assertEqual(weights[ScoreCategory.REGULATORY_COMPATIBILITY], 1.25)
        self.assertEqual(weights[ScoreCategory.DIGITAL_READINESS], 1.0)

    def test_first_match_in_table_order_wins(self):
        _, key = resolve_industry_weights("Financial Technology")
        self.assertEqual(key, "technology")

    def test_multipliers_never_reduce(self):
        weights, _ = resolve_industry_weights("E-commerce")
        self.assertTrue(all(w >= 1.0 for w in weights.values()))

    def test_apply_weights_rounds_and_caps(self):
        raw = {category: 50 for category in ScoreCategory}
        raw[ScoreCategory.DIGITAL_READINESS] = 90
        raw[ScoreCategory.LOGISTICS_POTENTIAL] = 40
        weights, _ = resolve_industry_weights("e-commerce")
        breakdown = apply_weights(raw, weights)
        self.assertEqual(breakdown[ScoreCategory.DIGITAL_READINESS], 100)
        self.assertEqual(breakdown[ScoreCategory.LOGISTICS_POTENTIAL], 46)
        self.assertEqual(breakdown[ScoreCategory.SCALABILITY_AUTOMATION], 55)
        self.assertEqual(breakdown[ScoreCategory.PRODUCT_MARKET_FIT], 50)


class TestWeightingFactor(unittest.TestCase):

    def test_uplift_is_recorded(self):
        factor = weighting_factor(40, 46, 1.15, "e-commerce")
        self.assertEqual(factor.label, "Industry Weighting")
        self.assertEqual(factor.points, 6)
        self.assertEqual(factor.impact, Impact.NEUTRAL)
        self.assertIn("x1.15", factor.evidence)

    def test_no_factor_without_uplift(self):
        self.assertIsNone(weighting_factor(50, 50, 1.0, None))
        self.assertIsNone(weighting_factor(0, 0, 1.2, "technology"))
        self.assertIsNone(weighting_factor(100, 100, 1.2, "technology"))

    def test_capped_uplift(self):
        self.assertEqual(weighting_factor(90, 100, 1.15, "e-commerce").points, 10)


class TestOverallScore(unittest.TestCase):

    def test_uniform_breakdown(self):
        breakdown = {category: 60 for category in ScoreCategory}
        self.assertEqual(calculate_overall_score(breakdown, CategoryWeights()), 60)

    def test_weighted_sum(self):
        breakdown = {category: 0 for category in ScoreCategory}
        breakdown[ScoreCategory.PRODUCT_MARKET_FIT] = 100
        self.assertEqual(calculate_overall_score(breakdown, CategoryWeights()), 20)


class TestCompleteness(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_empty_profile(self):
        completeness, details = calculate_data_completeness(make_profile(), self.config)
        self.assertEqual(completeness, 0)
        self.assertEqual(len(details['critical_missing']), 8)

    def test_placeholders_count_as_missing(self):
        completeness, _ = calculate_data_completeness(
            make_profile(company_name="Not provided", industry="Not specified"), self.config
        )
        self.assertEqual(completeness, 0)

    def test_critical_and_optional_split(self):
        profile = make_profile(
            company_name="Acme", business_description="Homeware", industry="retail",
            company_size="1-10", uk_registered="no",
        )
        completeness, details = calculate_data_completeness(profile, self.config)
        self.assertEqual(completeness, 44)  # 5/8 * 70 = 43.75
        self.assertEqual(details['critical_missing'], ['target_market', 'primary_objective', 'business_type'])

    def test_full_profile(self):
        profile = make_profile(
            company_name="Acme", business_description="Homeware", industry="retail",
            company_size="1-10", target_market="UK", primary_objective="Expand",
            uk_registered="yes", business_type="Ltd", website_url="https://acme.example",
            online_sales_platform="yes", social_media_platforms=["Instagram"],
            compliance_completed=["VAT"], planned_investments=["Warehouse"],
            market_entry_timeline="3-6 months",
        )
        completeness, _ = calculate_data_completeness(profile, self.config)
        self.assertEqual(completeness, 100)

    def test_completeness_never_decreases_when_fields_are_added(self):
        fields = [
            ("company_name", "Acme"), ("website_url", "https://acme.example"),
            ("industry", "retail"), ("planned_investments", ["Warehouse"]),
            ("business_type", "Ltd"), ("market_entry_timeline", "6-12 months"),
        ]
        data = {}
        previous = 0
        for name, value in fields:
            data[name] = value
            completeness, _ = calculate_data_completeness(make_profile(**data), self.config)
            self.assertGreaterEqual(completeness, previous)
            previous = completeness


class TestConfidence(unittest.TestCase):

    def setUp(self):
        self.thresholds = ConfidenceThresholds()

    def test_high(self):
        self.assertEqual(determine_confidence(80, 30, self.thresholds), Confidence.HIGH)

    def test_high_needs_minimum_score(self):
        self.assertEqual(determine_confidence(90, 29, self.thresholds), Confidence.MEDIUM)

    def test_medium_from_completeness_or_score(self):
        self.assertEqual(determine_confidence(60, 10, self.thresholds), Confidence.MEDIUM)
        self.assertEqual(determine_confidence(20, 50, self.thresholds), Confidence.MEDIUM)

    def test_low(self):
        self.assertEqual(determine_confidence(44, 22, self.thresholds), Confidence.LOW)

    def test_same_score_different_completeness_differs(self):
        self.assertNotEqual(
            determine_confidence(85, 40, self.thresholds),
            determine_confidence(50, 40, self.thresholds),
        )


if __name__ == '__main__':
    unittest.main()
