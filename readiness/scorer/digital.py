#!/usr/bin/env python3
"""
Digital Readiness - Website, e-commerce and online channel presence.

When extracted website signals are available they replace the URL-only rule
with a single "Website Quality" factor built from the observed signals.
"""

from typing import List, Optional, Tuple
import logging

from readiness.records import BusinessProfile, SiteSignals
from readiness.scorer.models import CategoryEvidence, ScoreCategory, ScoreFactor
from readiness.utils import distinct, is_absent, is_present, join_preview

logger = logging.getLogger(__name__)

COMPREHENSIVE_CONTENT_CHARS = 1500
MODERATE_CONTENT_CHARS = 800


def _website_signal_points(signals: SiteSignals) -> Tuple[int, List[str]]:
    points = 5
    notes = ["website exists"]

    if signals.content_length > COMPREHENSIVE_CONTENT_CHARS:
        points += 5
        notes.append("comprehensive content (1500+ chars)")
    elif signals.content_length > MODERATE_CONTENT_CHARS:
        points += 3
        notes.append("moderate content")

    if signals.has_navigation:
        points += 3
        notes.append("professional navigation")
    if signals.has_contact_form:
        points += 3
        notes.append("contact form present")
    if signals.has_ssl:
        points += 2
        notes.append("SSL secured")
    if signals.has_shopping_cart:
        points += 5
        notes.append("e-commerce enabled")
    if signals.has_local_currency or signals.has_local_address:
        points += 5
        notes.append("UK market targeting")
    if len(signals.languages) > 1:
        points += 2
        notes.append(f"{len(signals.languages)} languages")

    return points, notes


def website_factor(profile: BusinessProfile, signals: Optional[SiteSignals]) -> ScoreFactor:
    if signals is not None and signals.analysed:
        points, notes = _website_signal_points(signals)
        evidence = ", ".join(notes)
        return ScoreFactor.positive("Website Quality", points, evidence[0].upper() + evidence[1:])

    if is_present(profile.website_url):
        return ScoreFactor.neutral(
            "Website URL Provided", 5,
            "Website URL present but content not analyzed"
        )

    return ScoreFactor.negative(
        "No Website", 20,
        "Website essential for UK market credibility and sales"
    )


def english_website_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    if profile.has_english_website is True:
        return ScoreFactor.positive(
            "English Language Support", 15,
            "Website available in English - critical for UK market access"
        )
    if profile.has_english_website is False:
        return ScoreFactor.negative(
            "No English Website", 10,
            "English language website required for UK market"
        )
    return None


def ecommerce_factor(profile: BusinessProfile) -> ScoreFactor:
    if profile.online_sales_enabled:
        return ScoreFactor.positive(
            "E-commerce Enabled", 25,
            "Online sales platform ready for UK market"
        )
    return ScoreFactor.negative(
        "No E-commerce Platform", 15,
        "E-commerce capability critical for UK B2C market"
    )


def platforms_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    platforms = distinct(profile.digital_presence, profile.social_media_platforms)
    if len(platforms) >= 4:
        return ScoreFactor.positive(
            "Strong Multi-Channel Presence", 20,
            f"Active on {len(platforms)} platforms: {join_preview(platforms, 4)}"
        )
    if len(platforms) >= 2:
        return ScoreFactor.positive(
            "Good Digital Presence", 15,
            f"Present on {len(platforms)} platforms"
        )
    if platforms:
        return ScoreFactor.neutral(
            "Basic Digital Presence", 8,
            f"Limited to {len(platforms)} platform(s)"
        )
    return None


def website_features_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    features = profile.website_features
    if len(features) >= 4:
        return ScoreFactor.positive(
            "Advanced Website Features", 15,
            f"{len(features)} features implemented including {join_preview(features, 3)}"
        )
    if features:
        return ScoreFactor.neutral(
            "Basic Website Features", 8,
            f"{len(features)} basic feature(s) present"
        )
    return None


def marketing_budget_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    if is_absent(profile.digital_marketing_budget):
        return None
    return ScoreFactor.positive(
        "Marketing Budget Allocated", 10,
        "Digital marketing budget planned for UK market"
    )


def score_digital_readiness(
    profile: BusinessProfile,
    site_signals: Optional[SiteSignals] = None
) -> CategoryEvidence:
    if site_signals is not None and not site_signals.analysed:
        logger.info("Website signals unavailable (status=%s), using URL-only rule",
                    site_signals.scraping_status)

    evidence = CategoryEvidence.from_factors(ScoreCategory.DIGITAL_READINESS, [
        website_factor(profile, site_signals),
        english_website_factor(profile),
        ecommerce_factor(profile),
        platforms_factor(profile),
        website_features_factor(profile),
        marketing_budget_factor(profile),
    ])
    logger.debug("Digital readiness %d (raw %d)", evidence.score, evidence.raw_points)
    return evidence
