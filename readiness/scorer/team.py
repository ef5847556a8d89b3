#!/usr/bin/env python3
"""
Founder & Team Strength - Operating track record, team size and strategic clarity.
"""

from datetime import date
from typing import Optional
import logging

from readiness.records import BusinessProfile
from readiness.scorer.models import CategoryEvidence, ScoreCategory, ScoreFactor
from readiness.scorer.vocabulary import (
    LARGE_COMPANY_SIZES,
    MID_COMPANY_SIZES,
    SMALL_COMPANY_SIZES,
)
from readiness.utils import contains_any, is_absent

logger = logging.getLogger(__name__)

TEAM_BASE_POINTS = 30


def years_in_business(profile: BusinessProfile, as_of: date) -> Optional[int]:
    if profile.year_established is None:
        return None
    return max(0, as_of.year - profile.year_established)


def track_record_factor(profile: BusinessProfile, as_of: date) -> Optional[ScoreFactor]:
    years = years_in_business(profile, as_of)
    if years is None:
        return None
    if years >= 5:
        return ScoreFactor.positive(
            "Experienced Leadership", 30,
            f"{years} years of operational experience demonstrates proven execution"
        )
    if years >= 2:
        return ScoreFactor.neutral(
            "Established Track Record", 20,
            f"{years} year(s) operational - building track record"
        )
    if years >= 1:
        return ScoreFactor.neutral(
            "Early Stage Leadership", 12,
            "Early stage business with initial operating history"
        )
    return None


def team_size_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    size = profile.company_size
    if contains_any(size, LARGE_COMPANY_SIZES):
        return ScoreFactor.positive(
            "Complete Team Structure", 25,
            f"Team size ({size}) indicates comprehensive organizational capability"
        )
    if contains_any(size, MID_COMPANY_SIZES):
        return ScoreFactor.positive(
            "Growing Team", 18,
            "Mid-size team with specialized roles developing"
        )
    if contains_any(size, SMALL_COMPANY_SIZES):
        return ScoreFactor.neutral(
            "Compact Team", 10,
            "Small team - may need expansion for UK market operations"
        )
    return None


def strategic_vision_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    if is_absent(profile.primary_objective):
        return None
    return ScoreFactor.positive(
        "Clear Strategic Vision", 15,
        f"Defined objective: {profile.primary_objective}"
    )


def score_founder_team_strength(profile: BusinessProfile, as_of: date) -> CategoryEvidence:
    evidence = CategoryEvidence.from_factors(ScoreCategory.FOUNDER_TEAM_STRENGTH, [
        ScoreFactor.neutral(
            "Active Business Operations", TEAM_BASE_POINTS,
            "Business currently operational"
        ),
        track_record_factor(profile, as_of),
        team_size_factor(profile),
        strategic_vision_factor(profile),
    ])
    logger.debug("Founder & team strength %d", evidence.score)
    return evidence
