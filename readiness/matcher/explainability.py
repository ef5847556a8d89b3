#!/usr/bin/env python3
"""
Explainability Module - Justification text for partner match scores.

Every explanation is chosen from the same score tier that produced the
number (>=80 strong, >=50 moderate, otherwise weak), so text and score never
disagree.
"""

from typing import Sequence
import logging

from readiness.matcher.models import MatchFactor
from readiness.records import BusinessProfile, PartnerRecord
from readiness.utils import is_present

logger = logging.getLogger(__name__)

STRONG_TIER = 80
MODERATE_TIER = 50


def _tier(score: int, strong: str, moderate: str, weak: str) -> str:
    if score >= STRONG_TIER:
        return strong
    if score >= MODERATE_TIER:
        return moderate
    return weak


def explain_industry_expertise(score: int, profile: BusinessProfile) -> str:
    industry = profile.industry if is_present(profile.industry) else "your sector"
    return _tier(
        score,
        f"Strong industry expertise in {industry} - partner specialties directly align with your sector",
        "Relevant experience in similar industries - partner has transferable expertise",
        "General business expertise - partner can provide standard services but lacks specific industry focus",
    )


def explain_need_alignment(score: int) -> str:
    return _tier(
        score,
        "Critical need identified - your business requires immediate support in this area for UK market success",
        "Important support area - will enhance your UK market readiness and competitiveness",
        "Nice-to-have support - may be beneficial for long-term optimization",
    )


def explain_business_stage(score: int, profile: BusinessProfile) -> str:
    stage = profile.company_size if is_present(profile.company_size) else "your business stage"
    return _tier(
        score,
        f"Perfect fit for {stage} - partner specializes in similar-sized organizations",
        "Suitable for your business stage - partner has experience across various company sizes",
        "May be better suited for different business stages",
    )


def explain_geographic_relevance(score: int, profile: BusinessProfile) -> str:
    market = profile.target_market if is_present(profile.target_market) else "your target market"
    return _tier(
        score,
        f"Excellent local presence in {market} - deep understanding of regional regulations and market dynamics",
        "UK-wide coverage with ability to service your target regions effectively",
        "Can provide remote services but may lack local market expertise",
    )


def explain_service_depth(score: int, category: str) -> str:
    return _tier(
        score,
        f"Comprehensive service offering covering all your needs in {category} - one-stop solution",
        "Core services available - may need supplementary support for specialized requirements",
        "Basic service coverage - sufficient for initial needs",
    )


def strongest_factor(factors: Sequence[MatchFactor]) -> MatchFactor:
    """Factor with the largest weighted contribution; the earliest wins ties."""
    best = factors[0]
    for factor in factors[1:]:
        if factor.weighted_score > best.weighted_score:
            best = factor
    return best


def generate_recommendation_reason(
    partner: PartnerRecord,
    category: str,
    match_score: int,
    factors: Sequence[MatchFactor]
) -> str:
    top = strongest_factor(factors).name.lower()

    if match_score >= 85:
        return (f"Excellent match: {partner.name} is highly recommended due to {top} and "
                f"comprehensive {category} expertise specifically suited to your business needs.")
    if match_score >= 70:
        return (f"Strong match: {partner.name} offers solid {category} services with particular "
                f"strength in {top}, making them well-suited to support your UK market entry.")
    if match_score >= 55:
        return (f"Good fit: {partner.name} provides quality {category} services and can effectively "
                f"support your business, with notable capability in {top}.")
    return (f"Suitable option: {partner.name} offers standard {category} services that meet "
            f"basic requirements for UK market operations.")
