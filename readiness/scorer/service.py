#!/usr/bin/env python3
"""
Scoring Service - Evidence-based readiness scoring.

Takes a business profile plus optional registry verification and website
signals and calculates:
- Seven category scores, each the clamped sum of its evidence factors
- Industry-weighted breakdown and the overall score
- Data completeness and a confidence label

Stateless: the service only holds its configuration, so one instance can be
shared across threads.
"""

from datetime import date
from types import MappingProxyType
from typing import List, Optional
import logging

from readiness.config_loader import ScorerConfig
from readiness.records import BusinessProfile, SiteSignals, VerificationRecord
from readiness.scorer.models import CategoryEvidence, ScoringResult
from readiness.scorer import completeness
from readiness.scorer import weights as weighting
from readiness.scorer.digital import score_digital_readiness
from readiness.scorer.investment import score_investment_readiness
from readiness.scorer.market_fit import score_product_market_fit
from readiness.scorer.operations import score_logistics_potential, score_scalability_automation
from readiness.scorer.regulatory import score_regulatory_compatibility
from readiness.scorer.team import score_founder_team_strength

logger = logging.getLogger(__name__)


class ScoringService:
    """
    Service for readiness scoring.

    Every category is evaluated from the same immutable inputs, so results are
    identical for identical inputs and the same as_of date.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()

    def evaluate_categories(
        self,
        profile: BusinessProfile,
        verification: Optional[VerificationRecord] = None,
        site_signals: Optional[SiteSignals] = None,
        as_of: Optional[date] = None
    ) -> List[CategoryEvidence]:
        as_of = as_of or date.today()
        return [
            score_product_market_fit(profile),
            score_regulatory_compatibility(profile, verification, as_of),
            score_digital_readiness(profile, site_signals),
            score_logistics_potential(profile),
            score_scalability_automation(profile),
            score_founder_team_strength(profile, as_of),
            score_investment_readiness(profile),
        ]

    def score(
        self,
        profile: BusinessProfile,
        verification: Optional[VerificationRecord] = None,
        site_signals: Optional[SiteSignals] = None,
        as_of: Optional[date] = None
    ) -> ScoringResult:
        """Score a business profile.

        Args:
            profile: Business profile (fields may be missing)
            verification: Optional registry verification record
            site_signals: Optional extracted website signals
            as_of: Reference date for company age, defaults to today

        Returns:
            ScoringResult with breakdown, evidence and confidence
        """
        evidence = self.evaluate_categories(profile, verification, site_signals, as_of)
        raw_scores = {e.category: e.score for e in evidence}

        applied_weights, industry_profile = weighting.resolve_industry_weights(profile.industry)
        breakdown = weighting.apply_weights(raw_scores, applied_weights)
        overall_score = weighting.calculate_overall_score(breakdown, self.config.overall_weights)

        score_evidence = {}
        for e in evidence:
            uplift = weighting.weighting_factor(
                e.score, breakdown[e.category], applied_weights[e.category], industry_profile
            )
            score_evidence[e.category] = e.factors + (uplift,) if uplift else e.factors

        data_completeness, completeness_details = completeness.calculate_data_completeness(
            profile, self.config
        )
        confidence = completeness.determine_confidence(
            data_completeness, overall_score, self.config.confidence
        )

        logger.info(
            f"Scored {profile.company_name or 'unnamed business'}: overall={overall_score}, "
            f"completeness={data_completeness}, confidence={confidence.value}, "
            f"industry_profile={industry_profile or 'default'}"
        )
        if completeness_details['critical_missing']:
            logger.debug(f"Missing critical fields: {completeness_details['critical_missing']}")

        return ScoringResult(
            overall_score=overall_score,
            score_breakdown=MappingProxyType(breakdown),
            score_evidence=MappingProxyType(score_evidence),
            confidence_level=confidence,
            data_completeness=data_completeness,
            raw_scores=MappingProxyType(raw_scores),
            applied_weights=MappingProxyType(applied_weights),
            industry_profile=industry_profile,
        )
