#!/usr/bin/env python3
"""
Matching Service - Partner shortlists per service category.

For each candidate category:
1. Score every partner in the category (PartnerMatcher)
2. Drop partners at or below the relevance floor
3. Keep the top N (more for high-stakes categories)
4. Attach reason, urgency and insights

Categories are returned most urgent first, then by average match score.
Categories without surviving partners are omitted.
"""
from typing import List, Optional, Sequence
import logging

from readiness.config_loader import MatcherConfig
from readiness.matcher.insights import average_match_score, build_category_insights
from readiness.matcher.models import CategoryRecommendation, PartnerMatch
from readiness.matcher.partner_matcher import PartnerMatcher
from readiness.matcher.signals import CANDIDATE_CATEGORIES, display_name
from readiness.records import BusinessProfile, PartnerRecord
from readiness.scorer.models import ScoringResult

logger = logging.getLogger(__name__)


class MatchingService:
    """
    Service for ranking partners against a scored business.

    Holds only its configuration; safe to share across threads.
    """

    def __init__(self, config: Optional[MatcherConfig] = None):
        """
        Initialize matching service.

        Args:
            config: MatcherConfig with factor weights and shortlist sizes
        """
        self.config = config or MatcherConfig()
        self.partner_matcher = PartnerMatcher(self.config.factor_weights)

    def shortlist_size(self, category: str) -> int:
        if category in self.config.high_stakes_categories:
            return self.config.high_stakes_top_n
        return self.config.top_n

    def eligible_partners(self, partners: Sequence[PartnerRecord]) -> List[PartnerRecord]:
        if not self.config.require_verified:
            return list(partners)
        verified = [p for p in partners if p.is_verified]
        logger.debug(f"Verified-only matching kept {len(verified)} of {len(partners)} partners")
        return verified

    def rank_category(
        self,
        category: str,
        partners: Sequence[PartnerRecord],
        profile: BusinessProfile,
        scoring_result: ScoringResult
    ) -> List[PartnerMatch]:
        """
        Score, filter and truncate one category's partners.

        Returns:
            Matches sorted by match_score descending (input order kept on ties)
        """
        matches = self.partner_matcher.match_all(list(partners), profile, scoring_result, category)
        relevant = [m for m in matches if m.match_score > self.config.relevance_floor]
        if len(relevant) < len(matches):
            logger.debug(
                f"Dropped {len(matches) - len(relevant)} {category} partners at or below "
                f"relevance floor {self.config.relevance_floor}"
            )
        relevant.sort(key=lambda m: m.match_score, reverse=True)
        return relevant[:self.shortlist_size(category)]

    def match(
        self,
        partners: Sequence[PartnerRecord],
        profile: BusinessProfile,
        scoring_result: ScoringResult
    ) -> List[CategoryRecommendation]:
        """
        Build category recommendations for a business.

        Args:
            partners: Partner pool (any category; unknown categories are ignored)
            profile: Business profile that was scored
            scoring_result: Result of ScoringService.score for the same profile

        Returns:
            CategoryRecommendations ordered by urgency, then average match score
        """
        pool = self.eligible_partners(partners)
        recommendations = []

        for category in CANDIDATE_CATEGORIES:
            candidates = [p for p in pool if p.category == category]
            if not candidates:
                continue

            shortlist = self.rank_category(category, candidates, profile, scoring_result)
            if not shortlist:
                logger.info(f"No relevant {category} partners above the relevance floor")
                continue

            reason, urgency, insights = build_category_insights(
                category, profile, scoring_result, shortlist
            )
            recommendations.append(CategoryRecommendation(
                category=category,
                display_name=display_name(category),
                partners=tuple(shortlist),
                reason=reason,
                urgency=urgency,
                insights=insights,
                average_match_score=average_match_score(shortlist),
            ))

        recommendations.sort(key=lambda r: (r.urgency.rank, r.average_match_score), reverse=True)

        logger.info(
            f"Matched {len(pool)} partners into {len(recommendations)} categories: "
            f"{[r.category for r in recommendations]}"
        )
        return recommendations
