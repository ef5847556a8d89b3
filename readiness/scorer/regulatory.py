#!/usr/bin/env python3
"""
Regulatory Compatibility - Registration, legal structure and compliance progress.

Registration is tiered: a verified registration outranks any self-reported
one, and older verified companies outrank newer ones. No registration at all
is a penalty, as is having no compliance progress.
"""

from datetime import date
from typing import Optional
import logging

from readiness.records import BusinessProfile, VerificationRecord
from readiness.scorer.models import CategoryEvidence, ScoreCategory, ScoreFactor
from readiness.scorer.vocabulary import APPROPRIATE_ENTITY_TYPES
from readiness.utils import contains_any, distinct, is_absent, join_preview

logger = logging.getLogger(__name__)

STRONG_COMPLIANCE_ITEMS = 3
POINTS_PER_COMPLIANCE_ITEM = 8
PARTIAL_COMPLIANCE_CAP = 20
POINTS_PER_IP_ITEM = 8
IP_PROTECTION_CAP = 15


def registration_factor(
    profile: BusinessProfile,
    verification: Optional[VerificationRecord],
    as_of: date
) -> ScoreFactor:
    if verification is not None and verification.verified:
        age = verification.age_on(as_of) or 0
        if age >= 2:
            return ScoreFactor.positive(
                "Established UK Company", 30,
                f"Verified UK company operating for {age} years (Companies House verified)"
            )
        if age >= 1:
            return ScoreFactor.positive(
                "Recent UK Registration", 25,
                f"UK company registered {age} year(s) ago (verified)"
            )
        return ScoreFactor.positive(
            "New UK Registration", 20,
            "Recently registered UK company (verified)"
        )

    if profile.uk_registered == "yes":
        return ScoreFactor.neutral(
            "UK Registered (Unverified)", 15,
            "Self-reported UK registration - verification recommended"
        )

    return ScoreFactor.negative(
        "No UK Registration", 20,
        "UK company registration required for optimal market access"
    )


def business_structure_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    if is_absent(profile.business_type):
        return None
    if contains_any(profile.business_type, APPROPRIATE_ENTITY_TYPES):
        return ScoreFactor.positive(
            "Business Structure", 20,
            f"{profile.business_type} is suitable for UK operations"
        )
    return ScoreFactor.neutral(
        "Business Structure", 12,
        f"{profile.business_type} may need restructuring for UK market"
    )


def compliance_factor(profile: BusinessProfile) -> ScoreFactor:
    items = distinct(profile.regulatory_compliance, profile.compliance_completed)
    if len(items) >= STRONG_COMPLIANCE_ITEMS:
        return ScoreFactor.positive(
            "Strong Compliance Track Record", 25,
            f"{len(items)} compliance areas completed: {join_preview(items, 3)}"
        )
    if items:
        points = min(PARTIAL_COMPLIANCE_CAP, len(items) * POINTS_PER_COMPLIANCE_ITEM)
        return ScoreFactor.positive(
            "Compliance Progress", points,
            f"{len(items)} compliance item(s) completed: {join_preview(items)}"
        )
    return ScoreFactor.negative(
        "No Compliance Progress", 15,
        "No documented compliance progress - critical gap for UK market entry"
    )


def certifications_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    certifications = profile.quality_certifications
    if len(certifications) >= 2:
        return ScoreFactor.positive(
            "Quality Certifications", 20,
            f"{len(certifications)} certifications: {join_preview(certifications)}"
        )
    if certifications:
        return ScoreFactor.neutral(
            "Basic Certification", 12,
            f"{certifications[0]} certification obtained"
        )
    return None


def ip_protection_factor(profile: BusinessProfile) -> Optional[ScoreFactor]:
    protections = profile.ip_protection
    if not protections:
        return None
    return ScoreFactor.positive(
        "Intellectual Property Protection",
        min(IP_PROTECTION_CAP, len(protections) * POINTS_PER_IP_ITEM),
        f"IP protection in place: {join_preview(protections)}"
    )


def score_regulatory_compatibility(
    profile: BusinessProfile,
    verification: Optional[VerificationRecord],
    as_of: date
) -> CategoryEvidence:
    evidence = CategoryEvidence.from_factors(ScoreCategory.REGULATORY_COMPATIBILITY, [
        registration_factor(profile, verification, as_of),
        business_structure_factor(profile),
        compliance_factor(profile),
        certifications_factor(profile),
        ip_protection_factor(profile),
    ])
    logger.debug("Regulatory compatibility %d (raw %d)", evidence.score, evidence.raw_points)
    return evidence
