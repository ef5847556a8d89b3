#!/usr/bin/env python3
"""
Investment Readiness - Budget, revenue, investment plans and financial planning.

Budget and revenue are matched against the bracket labels used by the intake
form ("100k+", "10k-50k", "1m-5m", ...), largest bracket first.
"""

from typing import Optional
import logging

from readiness.records import BusinessProfile
from readiness.scorer.models import CategoryEvidence, ScoreCategory, ScoreFactor
from readiness.scorer.vocabulary import (
    EARLY_REVENUES,
    GROWING_REVENUES,
    LIMITED_BUDGETS,
    MODERATE_BUDGETS,
    STRONG_REVENUES,
    SUBSTANTIAL_BUDGETS,
)
from readiness.utils import contains_any, is_present, join_preview

logger = logging.getLogger(__name__)

INVESTMENT_BASE_POINTS = 25


def budget_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    budget = profile.budget
    if contains_any(budget, SUBSTANTIAL_BUDGETS):
        return ScoreFactor.positive(
            "Substantial Investment Budget", 25,
            f"Budget range: {budget} - demonstrates serious commitment"
        )
    if contains_any(budget, MODERATE_BUDGETS):
        return ScoreFactor.positive(
            "Moderate Investment Budget", 18,
            f"Budget range: {budget} - adequate for initial entry"
        )
    if contains_any(budget, LIMITED_BUDGETS):
        return ScoreFactor.neutral(
            "Limited Investment Budget", 10,
            f"Budget range: {budget} - will require careful prioritization"
        )
    return None


def revenue_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    revenue = profile.annual_revenue
    if contains_any(revenue, STRONG_REVENUES):
        return ScoreFactor.positive(
            "Strong Revenue Base", 20,
            f"Revenue: {revenue} - solid financial foundation for expansion"
        )
    if contains_any(revenue, GROWING_REVENUES):
        return ScoreFactor.positive(
            "Growing Revenue", 15,
            f"Revenue: {revenue} - good growth trajectory"
        )
    if contains_any(revenue, EARLY_REVENUES):
        return ScoreFactor.neutral(
            "Early Revenue", 10,
            f"Revenue: {revenue} - early stage business"
        )
    return None


def investment_plan_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    investments = profile.planned_investments
    if len(investments) >= 3:
        return ScoreFactor.positive(
            "Comprehensive Investment Plan", 20,
            f"{len(investments)} investment areas identified: {join_preview(investments, 3)}"
        )
    if investments:
        return ScoreFactor.neutral(
            "Initial Investment Planning", 12,
            f"{len(investments)} investment area(s) planned"
        )
    return None


def success_metrics_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    metrics = profile.key_success_metrics
    if len(metrics) >= 3:
        return ScoreFactor.positive(
            "KPIs Established", 15,
            f"{len(metrics)} success metrics tracked: {join_preview(metrics, 3)}"
        )
    if metrics:
        return ScoreFactor.neutral(
            "Basic Metrics Tracked", 10,
            f"{len(metrics)} metric(s) defined"
        )
    return None


def financial_planning_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    if is_present(profile.financial_projections) or is_present(profile.revenue_model):
        return ScoreFactor.positive(
            "Financial Planning Complete", 15,
            "Revenue model and financial projections developed"
        )
    if profile.planned_investments or is_present(profile.budget):
        return ScoreFactor.neutral(
            "Basic Financial Planning", 8,
            "Investment areas and budget identified, detailed projections recommended"
        )
    return None


def score_investment_readiness(profile: BusinessProfile) -> CategoryEvidence:
    evidence = CategoryEvidence.from_factors(ScoreCategory.INVESTMENT_READINESS, [
        ScoreFactor.neutral(
            "Market Entry Interest", INVESTMENT_BASE_POINTS,
            "Actively pursuing UK market entry"
        ),
        budget_factor(profile),
        revenue_factor(profile),
        investment_plan_factor(profile),
        success_metrics_factor(profile),
        financial_planning_factor(profile),
    ])
    logger.debug("Investment readiness %d", evidence.score)
    return evidence
