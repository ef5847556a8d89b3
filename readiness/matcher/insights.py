#!/usr/bin/env python3
"""
Category insights - reason, urgency and three-line insight list per category.

Urgency reads the same business signals as need alignment, so a category the
business urgently needs also scores high on need alignment.
"""

from typing import Callable, Dict, Sequence, Tuple
import logging

from readiness.matcher.models import PartnerMatch, Urgency
from readiness.matcher.signals import is_high_compliance, is_product_based
from readiness.records import BusinessProfile
from readiness.scorer.models import ScoreCategory, ScoringResult
from readiness.utils import round_half_up

logger = logging.getLogger(__name__)

Insight = Tuple[str, Urgency, Tuple[str, ...]]


def average_match_score(matches: Sequence[PartnerMatch]) -> int:
    if not matches:
        return 0
    return round_half_up(sum(m.match_score for m in matches) / len(matches))


def _top_match(matches: Sequence[PartnerMatch]) -> Tuple[str, int]:
    return matches[0].partner.name, matches[0].match_score


def _legal(profile: BusinessProfile, result: ScoringResult, matches: Sequence[PartnerMatch]) -> Insight:
    unregistered = profile.declared_unregistered
    name, score = _top_match(matches)
    reason = (
        "UK company registration is a prerequisite for legal operations. Expert legal support will "
        "ensure proper entity structure, regulatory compliance, and protection of your business interests."
        if unregistered else
        "Ongoing legal compliance is essential for UK operations. Expert guidance ensures you meet all "
        "regulatory requirements and mitigate legal risks."
    )
    insights = (
        f"{len(matches)} legal partners identified with average {average_match_score(matches)}% match",
        "Immediate action needed: Company formation typically takes 24-48 hours"
        if unregistered else "Proactive compliance support recommended",
        f"Best match: {name} ({score}% compatibility)",
    )
    return reason, Urgency.HIGH if unregistered else Urgency.MEDIUM, insights


def _accounting(profile: BusinessProfile, result: ScoringResult, matches: Sequence[PartnerMatch]) -> Insight:
    name, score = _top_match(matches)
    reason = (
        "UK tax and accounting compliance is mandatory from day one. Professional accounting support "
        "ensures accurate financial records, timely tax submissions, and strategic financial planning."
    )
    insights = (
        f"{len(matches)} qualified accounting firms with average {average_match_score(matches)}% alignment",
        "Critical services: VAT registration, PAYE setup, Corporation Tax compliance",
        f"Top recommendation: {name} ({score}% match based on business needs)",
    )
    urgency = Urgency.HIGH if profile.declared_unregistered else Urgency.MEDIUM
    return reason, urgency, insights


def _marketing(profile: BusinessProfile, result: ScoringResult, matches: Sequence[PartnerMatch]) -> Insight:
    weak_digital = result.score_for(ScoreCategory.DIGITAL_READINESS) < 60
    name, score = _top_match(matches)
    reason = (
        "Your digital presence needs strengthening to compete in the UK market. Professional marketing "
        "support will accelerate customer acquisition and brand establishment."
        if weak_digital else
        "Strategic marketing support will optimize your UK market penetration and maximize return on "
        "marketing investment."
    )
    insights = (
        f"{len(matches)} specialist marketing agencies with {average_match_score(matches)}% average fit",
        "Priority focus: E-commerce platform setup and digital advertising"
        if profile.online_sales_platform == "no" else "Opportunity: Growth optimization and market expansion",
        f"Recommended agency: {name} ({score}% match score)",
    )
    return reason, Urgency.HIGH if weak_digital else Urgency.MEDIUM, insights


def _logistics(profile: BusinessProfile, result: ScoringResult, matches: Sequence[PartnerMatch]) -> Insight:
    product_based = is_product_based(profile)
    name, score = _top_match(matches)
    reason = (
        "Reliable logistics infrastructure is critical for product-based businesses. Professional "
        "logistics support ensures efficient fulfillment and customer satisfaction."
        if product_based else
        "Optimized logistics operations reduce costs and improve operational efficiency for UK market operations."
    )
    insights = (
        f"{len(matches)} logistics providers with {average_match_score(matches)}% average compatibility",
        "Key capabilities: UK warehousing, customs clearance, multi-channel fulfillment",
        f"Best fit: {name} ({score}% match based on your requirements)",
    )
    return reason, Urgency.HIGH if product_based else Urgency.MEDIUM, insights


def _consulting(profile: BusinessProfile, result: ScoringResult, matches: Sequence[PartnerMatch]) -> Insight:
    overall = result.overall_score
    if overall < 65:
        urgency = Urgency.HIGH
    elif overall < 80:
        urgency = Urgency.MEDIUM
    else:
        urgency = Urgency.LOW
    name, score = _top_match(matches)
    reason = (
        f"An overall readiness score of {overall}% points to gaps across several areas. Strategic "
        "consulting support will prioritise the changes with the biggest impact on your UK launch."
        if urgency is not Urgency.LOW else
        "Your readiness foundations are solid. Strategic consulting can sharpen growth planning and "
        "accelerate scaling in the UK market."
    )
    insights = (
        f"{len(matches)} strategy consultancies with {average_match_score(matches)}% average fit",
        "Priority focus: Market entry roadmap and operational readiness"
        if urgency is Urgency.HIGH else "Opportunity: Growth strategy and scaling plan",
        f"Best match: {name} ({score}% compatibility)",
    )
    return reason, urgency, insights


def _compliance(profile: BusinessProfile, result: ScoringResult, matches: Sequence[PartnerMatch]) -> Insight:
    regulatory = result.score_for(ScoreCategory.REGULATORY_COMPATIBILITY)
    if regulatory < 40:
        urgency = Urgency.HIGH
    elif regulatory < 65:
        urgency = Urgency.MEDIUM
    else:
        urgency = Urgency.LOW
    name, score = _top_match(matches)
    reason = (
        "Your industry is subject to sector-specific UK regulation. Specialist compliance support "
        "ensures the certifications and approvals you need are in place before launch."
        if is_high_compliance(profile) else
        f"A regulatory compatibility score of {regulatory}% indicates compliance work ahead. Specialist "
        "support reduces the risk of delays and penalties."
    )
    insights = (
        f"{len(matches)} compliance specialists with {average_match_score(matches)}% average match",
        "Immediate action needed: Close regulatory gaps before market entry"
        if urgency is Urgency.HIGH else "Proactive certification planning recommended",
        f"Top recommendation: {name} ({score}% match score)",
    )
    return reason, urgency, insights


_BUILDERS: Dict[str, Callable[[BusinessProfile, ScoringResult, Sequence[PartnerMatch]], Insight]] = {
    "legal": _legal,
    "accounting": _accounting,
    "marketing": _marketing,
    "logistics": _logistics,
    "consulting": _consulting,
    "compliance": _compliance,
}


def _generic(profile: BusinessProfile, result: ScoringResult, matches: Sequence[PartnerMatch]) -> Insight:
    name, score = _top_match(matches)
    insights = (
        f"{len(matches)} partners available with {average_match_score(matches)}% average match",
        "Support recommended as part of your UK market entry plan",
        f"Best match: {name} ({score}% compatibility)",
    )
    return "Professional support recommended for UK market success", Urgency.MEDIUM, insights


def build_category_insights(
    category: str,
    profile: BusinessProfile,
    scoring_result: ScoringResult,
    matches: Sequence[PartnerMatch]
) -> Insight:
    """
    Build (reason, urgency, insights) for a non-empty shortlist.

    Returns:
        Tuple of (reason text, urgency, exactly three insight strings)
    """
    builder = _BUILDERS.get(category, _generic)
    return builder(profile, scoring_result, matches)
