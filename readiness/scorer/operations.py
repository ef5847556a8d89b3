#!/usr/bin/env python3
"""
Operational categories: Logistics Potential and Scalability & Automation.

Both start from a fixed base for having an operating business and add points
for concrete operational plans. Neither category has penalties.
"""

from typing import Optional
import logging

from readiness.records import BusinessProfile
from readiness.scorer.models import CategoryEvidence, ScoreCategory, ScoreFactor
from readiness.scorer.vocabulary import (
    AUTOMATION_FEATURE_KEYWORDS,
    LARGE_COMPANY_SIZES,
    LOGISTICS_INVESTMENT_KEYWORDS,
    LOGISTICS_SUPPORT_KEYWORDS,
    MID_COMPANY_SIZES,
    TECH_INDUSTRY_KEYWORDS,
    TECH_INVESTMENT_KEYWORDS,
)
from readiness.utils import contains_any, join_preview, matching_items

logger = logging.getLogger(__name__)

LOGISTICS_BASE_POINTS = 40
SCALABILITY_BASE_POINTS = 35


# ============================================================================
# LOGISTICS POTENTIAL
# ============================================================================

def logistics_investment_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    investments = matching_items(profile.planned_investments, LOGISTICS_INVESTMENT_KEYWORDS)
    if not investments:
        return None
    return ScoreFactor.positive(
        "Logistics Investment Planned", 25,
        f"Investment planned: {join_preview(investments)}"
    )


def operations_scale_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    if contains_any(profile.company_size, LARGE_COMPANY_SIZES):
        return ScoreFactor.positive(
            "Established Operations Scale", 20,
            f"Company size ({profile.company_size}) indicates logistics capacity"
        )
    if contains_any(profile.company_size, MID_COMPANY_SIZES):
        return ScoreFactor.neutral(
            "Growing Operations", 12,
            "Mid-size company with developing logistics capability"
        )
    return None


def logistics_support_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    # Informational only, carries no points
    if matching_items(profile.required_support, LOGISTICS_SUPPORT_KEYWORDS):
        return ScoreFactor.neutral(
            "Logistics Support Identified", 0,
            "Recognized need for logistics partner support"
        )
    return None


def score_logistics_potential(profile: BusinessProfile) -> CategoryEvidence:
    evidence = CategoryEvidence.from_factors(ScoreCategory.LOGISTICS_POTENTIAL, [
        ScoreFactor.neutral(
            "Operational Foundation", LOGISTICS_BASE_POINTS,
            "Basic operational capacity established"
        ),
        logistics_investment_factor(profile),
        operations_scale_factor(profile),
        logistics_support_factor(profile),
    ])
    logger.debug("Logistics potential %d", evidence.score)
    return evidence


# ============================================================================
# SCALABILITY & AUTOMATION
# ============================================================================

def tech_native_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    if not contains_any(profile.industry, TECH_INDUSTRY_KEYWORDS):
        return None
    return ScoreFactor.positive(
        "Tech-Native Business Model", 25,
        f"{profile.industry} naturally suited for automation and scaling"
    )


def automation_infrastructure_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    if not matching_items(profile.website_features, AUTOMATION_FEATURE_KEYWORDS):
        return None
    return ScoreFactor.positive(
        "Automation Infrastructure", 20,
        "Digital automation tools already in use"
    )


def technology_investment_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    investments = matching_items(profile.planned_investments, TECH_INVESTMENT_KEYWORDS)
    if not investments:
        return None
    return ScoreFactor.positive(
        "Technology Investment Pipeline", 20,
        f"Planned investments: {join_preview(investments)}"
    )


def score_scalability_automation(profile: BusinessProfile) -> CategoryEvidence:
    evidence = CategoryEvidence.from_factors(ScoreCategory.SCALABILITY_AUTOMATION, [
        ScoreFactor.neutral(
            "Business Foundation", SCALABILITY_BASE_POINTS,
            "Core business operations in place"
        ),
        tech_native_factor(profile),
        automation_infrastructure_factor(profile),
        technology_investment_factor(profile),
    ])
    logger.debug("Scalability & automation %d", evidence.score)
    return evidence
