#!/usr/bin/env python3
"""
Product-Market Fit - How clearly the business knows its market and offer.

Rules:
- Target market defined (+20) or missing (-15)
- Target regions (UK/Europe +15, elsewhere +8)
- Current market presence (2+ markets +15, one +8)
- Business description depth (>200 chars +15, >50 chars +10)
- Business goals (>100 chars +15, any +8)
- Industry selection (high-growth +15, other +12)
- Market entry timeline (near-term +10, medium-term +8)
- Competitive differentiation (+15)
"""

from typing import Optional
import logging

from readiness.records import BusinessProfile
from readiness.scorer.models import CategoryEvidence, ScoreCategory, ScoreFactor
from readiness.scorer.vocabulary import (
    HIGH_GROWTH_INDUSTRIES,
    MEDIUM_TERM_TIMELINES,
    NEAR_TERM_TIMELINES,
    PRIORITY_REGIONS,
)
from readiness.utils import contains_any, is_absent, is_present, join_preview

logger = logging.getLogger(__name__)

RICH_DESCRIPTION_CHARS = 200
MINIMAL_DESCRIPTION_CHARS = 50
DETAILED_GOALS_CHARS = 100


def target_market_factor(profile: BusinessProfile) -> ScoreFactor:
    if is_present(profile.target_market):
        return ScoreFactor.positive(
            "Target Market Defined", 20,
            f"Specific target market identified: {profile.target_market}"
        )
    return ScoreFactor.negative(
        "Target Market Undefined", 15,
        "No clear target market specified, reducing market fit confidence"
    )


def target_regions_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    regions = profile.target_regions
    if is_absent(regions):
        return None
    if any(region.lower() in PRIORITY_REGIONS for region in regions):
        return ScoreFactor.positive(
            "UK Market Targeting", 15,
            f"UK specifically targeted among: {join_preview(regions)}"
        )
    return ScoreFactor.neutral(
        "International Targeting", 8,
        f"Targeting {join_preview(regions)} - UK should be prioritized"
    )


def current_markets_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    markets = profile.current_markets
    if len(markets) >= 2:
        return ScoreFactor.positive(
            "Multi-Market Experience", 15,
            f"Operating in {len(markets)} markets: {join_preview(markets, 3)}"
        )
    if markets:
        return ScoreFactor.neutral(
            "Single Market Presence", 8,
            f"Currently operating in: {markets[0]}"
        )
    return None


def description_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    description = profile.business_description if is_present(profile.business_description) else ""
    length = len(description)
    if length > RICH_DESCRIPTION_CHARS:
        return ScoreFactor.positive(
            "Detailed Value Proposition", 15,
            f"Comprehensive business description provided ({length} characters)"
        )
    if length > MINIMAL_DESCRIPTION_CHARS:
        return ScoreFactor.neutral(
            "Basic Value Proposition", 10,
            f"Basic business description provided ({length} characters)"
        )
    return None


def business_goals_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    if is_absent(profile.business_goals):
        return None
    if len(profile.business_goals) > DETAILED_GOALS_CHARS:
        return ScoreFactor.positive(
            "Clear Strategic Goals", 15,
            "Detailed business goals and objectives defined"
        )
    return ScoreFactor.neutral(
        "Basic Goals Outlined", 8,
        "Initial business goals documented"
    )


def industry_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    if is_absent(profile.industry):
        return None
    if contains_any(profile.industry, HIGH_GROWTH_INDUSTRIES):
        return ScoreFactor.positive(
            "Industry Selection", 15,
            f"{profile.industry} is a high-growth sector in the UK market"
        )
    return ScoreFactor.positive(
        "Industry Selection", 12,
        f"{profile.industry} has established UK market presence"
    )


def timeline_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    timeline = profile.market_entry_timeline
    if contains_any(timeline, NEAR_TERM_TIMELINES):
        return ScoreFactor.positive(
            "Realistic Timeline", 10,
            f"{timeline} timeline demonstrates readiness"
        )
    if contains_any(timeline, MEDIUM_TERM_TIMELINES):
        return ScoreFactor.positive(
            "Measured Timeline", 8,
            f"{timeline} approach shows strategic planning"
        )
    return None


def competitive_advantage_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    if is_present(profile.competitive_advantage) or is_present(profile.unique_selling_points):
        return ScoreFactor.positive(
            "Competitive Differentiation", 15,
            "Clear competitive advantages identified"
        )
    return None


def score_product_market_fit(profile: BusinessProfile) -> CategoryEvidence:
    evidence = CategoryEvidence.from_factors(ScoreCategory.PRODUCT_MARKET_FIT, [
        target_market_factor(profile),
        target_regions_factor(profile),
        current_markets_factor(profile),
        description_factor(profile),
        business_goals_factor(profile),
        industry_factor(profile),
        timeline_factor(profile),
        competitive_advantage_factor(profile),
    ])
    logger.debug("Product-market fit %d from %d factors", evidence.score, len(evidence.factors))
    return evidence
