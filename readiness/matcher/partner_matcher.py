#!/usr/bin/env python3
"""
Partner Matcher - Score one partner against one business for one category.

Computes five independent 0-100 subscores (industry expertise, business need
alignment, business stage, geographic relevance, service depth) and then a
weighted sum using configured weights.
"""
from typing import List
import logging
import re

from readiness.config_loader import FactorWeights
from readiness.matcher import explainability
from readiness.matcher.case_studies import find_relevant_case_study
from readiness.matcher.models import MatchFactor, PartnerMatch
from readiness.matcher.signals import (
    MAJOR_CITIES,
    NATIONWIDE_KEYWORDS,
    STAGE_KEYWORDS,
    compliance_item_count,
    is_high_compliance,
    is_product_based,
)
from readiness.records import BusinessProfile, PartnerRecord
from readiness.scorer.models import ScoreCategory, ScoringResult
from readiness.utils import contains_any, is_absent, round_half_up, text_of

logger = logging.getLogger(__name__)

# Subscore ladders
EXACT_INDUSTRY_SCORE = 95
RELATED_INDUSTRY_SCORE = 70
GENERAL_INDUSTRY_SCORE = 45
MIN_INDUSTRY_KEYWORD_LENGTH = 4

NEUTRAL_NEED_SCORE = 50
STAGE_MATCH_SCORE = 90
DEFAULT_STAGE_SCORE = 70

LOCAL_MARKET_SCORE = 95
MAJOR_CITY_SCORE = 80
NATIONWIDE_SCORE = 75
DEFAULT_LOCATION_SCORE = 60

# Score threshold below which a category is treated as weak
WEAK_CATEGORY_SCORE = 60

_INDUSTRY_SPLIT = re.compile(r"[\s,]+")


class PartnerMatcher:
    """Calculate how well a partner fits a business's needs in one category."""

    def __init__(self, weights: FactorWeights):
        """
        Initialize with factor weights.

        Args:
            weights: FactorWeights for the five match factors
        """
        self.weights = weights

    def match(
        self,
        partner: PartnerRecord,
        profile: BusinessProfile,
        scoring_result: ScoringResult,
        category: str
    ) -> PartnerMatch:
        industry_score = self.calculate_industry_match(partner, profile)
        need_score = self.calculate_need_alignment(profile, scoring_result, category)
        stage_score = self.calculate_stage_match(partner, profile)
        location_score = self.calculate_location_match(partner, profile)
        depth_score = self.calculate_service_depth(partner)

        factors = (
            MatchFactor(
                name="Industry Expertise",
                score=industry_score,
                weight=self.weights.industry_expertise,
                explanation=explainability.explain_industry_expertise(industry_score, profile),
            ),
            MatchFactor(
                name="Business Need Alignment",
                score=need_score,
                weight=self.weights.need_alignment,
                explanation=explainability.explain_need_alignment(need_score),
            ),
            MatchFactor(
                name="Business Stage Match",
                score=stage_score,
                weight=self.weights.business_stage,
                explanation=explainability.explain_business_stage(stage_score, profile),
            ),
            MatchFactor(
                name="Geographic Relevance",
                score=location_score,
                weight=self.weights.geographic_relevance,
                explanation=explainability.explain_geographic_relevance(location_score, profile),
            ),
            MatchFactor(
                name="Service Depth",
                score=depth_score,
                weight=self.weights.service_depth,
                explanation=explainability.explain_service_depth(depth_score, category),
            ),
        )

        match_score = round_half_up(sum(f.weighted_score for f in factors))
        logger.debug(
            f"Partner {partner.name} [{category}]: industry={industry_score}, need={need_score}, "
            f"stage={stage_score}, location={location_score}, depth={depth_score}, match={match_score}"
        )

        return PartnerMatch(
            partner=partner,
            match_score=match_score,
            match_factors=factors,
            recommendation_reason=explainability.generate_recommendation_reason(
                partner, category, match_score, factors
            ),
            relevant_case_study=find_relevant_case_study(category, profile.industry),
        )

    def calculate_industry_match(self, partner: PartnerRecord, profile: BusinessProfile) -> int:
        """
        Exact industry inside a specialty scores highest, then any shared
        industry keyword longer than three characters.
        """
        industry = text_of(profile.industry)
        if not industry or not partner.specialties:
            return GENERAL_INDUSTRY_SCORE

        specialties = [s.lower() for s in partner.specialties]
        if any(industry in specialty for specialty in specialties):
            return EXACT_INDUSTRY_SCORE

        keywords = [k for k in _INDUSTRY_SPLIT.split(industry) if len(k) >= MIN_INDUSTRY_KEYWORD_LENGTH]
        if any(keyword in specialty for specialty in specialties for keyword in keywords):
            return RELATED_INDUSTRY_SCORE

        return GENERAL_INDUSTRY_SCORE

    def calculate_need_alignment(
        self,
        profile: BusinessProfile,
        scoring_result: ScoringResult,
        category: str
    ) -> int:
        """Category-specific ladder over the business's weakest relevant signals."""
        score_of = scoring_result.score_for

        if category == "legal":
            if profile.declared_unregistered:
                return 95
            if compliance_item_count(profile) < 2:
                return 75
            if score_of(ScoreCategory.REGULATORY_COMPATIBILITY) < WEAK_CATEGORY_SCORE:
                return 70

        elif category == "accounting":
            if profile.declared_unregistered:
                return 90
            if score_of(ScoreCategory.INVESTMENT_READINESS) < WEAK_CATEGORY_SCORE:
                return 80
            if is_absent(profile.financial_metrics):
                return 70

        elif category == "marketing":
            if profile.online_sales_platform == "no":
                return 95
            if score_of(ScoreCategory.DIGITAL_READINESS) < WEAK_CATEGORY_SCORE:
                return 85
            if is_absent(profile.social_media_platforms):
                return 70

        elif category == "logistics":
            if is_product_based(profile):
                if score_of(ScoreCategory.LOGISTICS_POTENTIAL) < WEAK_CATEGORY_SCORE:
                    return 90
                return 75

        elif category == "consulting":
            overall = scoring_result.overall_score
            if overall < 65:
                return 85
            if score_of(ScoreCategory.FOUNDER_TEAM_STRENGTH) < 70 or overall < 75:
                return 70

        elif category == "compliance":
            weak_regulatory = score_of(ScoreCategory.REGULATORY_COMPATIBILITY) < WEAK_CATEGORY_SCORE
            if is_high_compliance(profile):
                return 90 if weak_regulatory else 75
            if weak_regulatory:
                return 65

        return NEUTRAL_NEED_SCORE

    def calculate_stage_match(self, partner: PartnerRecord, profile: BusinessProfile) -> int:
        size = text_of(profile.company_size)
        specialties = " ".join(partner.specialties).lower()
        if not size or not specialties:
            return DEFAULT_STAGE_SCORE

        for size_markers, specialty_markers in STAGE_KEYWORDS:
            if contains_any(size, size_markers) and contains_any(specialties, specialty_markers):
                return STAGE_MATCH_SCORE

        return DEFAULT_STAGE_SCORE

    def calculate_location_match(self, partner: PartnerRecord, profile: BusinessProfile) -> int:
        location = text_of(partner.location)
        if not location:
            return DEFAULT_LOCATION_SCORE

        target_market = text_of(profile.target_market)
        if target_market and target_market in location:
            return LOCAL_MARKET_SCORE

        if contains_any(location, NATIONWIDE_KEYWORDS):
            return NATIONWIDE_SCORE

        if contains_any(location, MAJOR_CITIES):
            return MAJOR_CITY_SCORE

        return DEFAULT_LOCATION_SCORE

    def calculate_service_depth(self, partner: PartnerRecord) -> int:
        count = len(partner.specialties)
        if count >= 5:
            return 85
        if count >= 3:
            return 75
        return 65

    def match_all(
        self,
        partners: List[PartnerRecord],
        profile: BusinessProfile,
        scoring_result: ScoringResult,
        category: str
    ) -> List[PartnerMatch]:
        return [self.match(p, profile, scoring_result, category) for p in partners]
