#!/usr/bin/env python3
"""
Test suite for ScoringService: range, evidence traceability, idempotence and
monotonicity across a spread of profiles.
"""

import pytest

from readiness.config_loader import ScorerConfig
from readiness.scorer import Impact, ScoreCategory, ScoringService
from readiness.scorer.models import Confidence
from readiness.utils import clamp_score
from tests import (
    AS_OF,
    full_site_signals,
    make_profile,
    registered_retail_data,
    unregistered_retail_data,
    verified_company,
)

PROFILES = [
    {},
    unregistered_retail_data(),
    registered_retail_data(),
    registered_retail_data(industry="Healthcare technology", online_sales_platform="yes"),
    {"industry": "Software technology", "website_url": "https://acme.example", "online_sales_platform": "yes",
     "social_media_platforms": ["LinkedIn", "X"], "website_features": ["CRM", "Analytics"]},
    {
        "company_name": "Widget Works", "industry": "Manufacturing", "company_size": "200+",
        "year_established": 1990, "budget": "100k+", "annual_revenue": "5m+",
        "planned_investments": ["Warehouse", "Automation", "Hiring"],
        "quality_certifications": ["ISO 9001", "ISO 14001"], "ip_protection": ["Patent"],
        "has_english_website": False,
    },
]


@pytest.mark.parametrize("data", PROFILES)
def test_scores_are_integers_in_range(scoring_service, data):
    result = scoring_service.score(make_profile(**data), as_of=AS_OF)
    assert isinstance(result.overall_score, int)
    assert 0 <= result.overall_score <= 100
    assert set(result.score_breakdown) == set(ScoreCategory)
    for score in result.score_breakdown.values():
        assert isinstance(score, int)
        assert 0 <= score <= 100
    assert 0 <= result.data_completeness <= 100


@pytest.mark.parametrize("data", PROFILES)
def test_evidence_traces_to_reported_scores(scoring_service, data):
    result = scoring_service.score(make_profile(**data), as_of=AS_OF)
    for category in ScoreCategory:
        points = sum(f.points for f in result.factors_for(category))
        assert clamp_score(points) == result.score_breakdown[category]


def test_breakdown_equals_raw_without_industry_override(scoring_service):
    result = scoring_service.score(make_profile(**unregistered_retail_data()), as_of=AS_OF)
    assert result.industry_profile is None
    assert dict(result.score_breakdown) == dict(result.raw_scores)


def test_industry_override_is_recorded(scoring_service):
    result = scoring_service.score(make_profile(industry="Technology", online_sales_platform="yes"),
                                   as_of=AS_OF)
    assert result.industry_profile == "technology"
    assert result.applied_weights[ScoreCategory.DIGITAL_READINESS] == 1.2
    assert result.score_breakdown[ScoreCategory.DIGITAL_READINESS] >= result.raw_scores[ScoreCategory.DIGITAL_READINESS]


def test_industry_uplift_appears_in_evidence(scoring_service):
    profile = make_profile(
        industry="Technology", website_url="https://acme.example", has_english_website=True,
        online_sales_platform="yes", social_media_platforms=["LinkedIn", "Instagram"],
    )
    result = scoring_service.score(profile, as_of=AS_OF)
    category = ScoreCategory.DIGITAL_READINESS

    # 5 + 15 + 25 + 15 = 60, weighted x1.2
    assert result.raw_scores[category] == 60
    assert result.score_breakdown[category] == 72
    uplift = result.factors_for(category)[-1]
    assert uplift.label == "Industry Weighting"
    assert uplift.points == 12
    assert uplift.impact == Impact.NEUTRAL
    assert clamp_score(sum(f.points for f in result.factors_for(category))) == 72


def test_no_uplift_factor_without_override(scoring_service):
    result = scoring_service.score(make_profile(**registered_retail_data()), as_of=AS_OF)
    for category in ScoreCategory:
        assert "Industry Weighting" not in [f.label for f in result.factors_for(category)]


def test_result_mappings_are_read_only(scoring_service):
    result = scoring_service.score(make_profile(**unregistered_retail_data()), as_of=AS_OF)
    category = ScoreCategory.DIGITAL_READINESS
    for mapping in (result.score_breakdown, result.score_evidence, result.raw_scores, result.applied_weights):
        with pytest.raises(TypeError):
            mapping[category] = 100


def test_idempotent(scoring_service):
    profile = make_profile(**registered_retail_data())
    first = scoring_service.score(profile, verified_company(), full_site_signals(), as_of=AS_OF)
    second = scoring_service.score(profile, verified_company(), full_site_signals(), as_of=AS_OF)
    assert first == second


def test_site_signals_never_lower_digital_score(scoring_service):
    profile = make_profile(**registered_retail_data())
    without_site = scoring_service.score(profile, as_of=AS_OF)
    with_site = scoring_service.score(profile, site_signals=full_site_signals(), as_of=AS_OF)
    category = ScoreCategory.DIGITAL_READINESS
    assert with_site.score_for(category) >= without_site.score_for(category)


def test_every_category_has_evidence(scoring_service):
    result = scoring_service.score(make_profile(), as_of=AS_OF)
    for category in ScoreCategory:
        assert result.factors_for(category), category


def test_custom_weights_change_overall():
    profile = make_profile(**unregistered_retail_data())
    default = ScoringService().score(profile, as_of=AS_OF)
    founder_only = ScoringService(ScorerConfig(overall_weights={
        "product_market_fit": 0.0, "regulatory_compatibility": 0.0, "digital_readiness": 0.0,
        "logistics_potential": 0.0, "scalability_automation": 0.0,
        "founder_team_strength": 1.0, "investment_readiness": 0.0,
    })).score(profile, as_of=AS_OF)
    assert default.overall_score == 22
    assert founder_only.overall_score == 70


def test_sparse_profile_is_low_confidence(scoring_service):
    result = scoring_service.score(make_profile(), as_of=AS_OF)
    assert result.confidence_level == Confidence.LOW
    assert result.data_completeness == 0
