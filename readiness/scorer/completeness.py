#!/usr/bin/env python3
"""
Data completeness and confidence.

Completeness measures how much of the profile was filled in, independent of
how well it scores. Critical fields carry most of the weight. Confidence
combines completeness with the overall score.
"""

from typing import Any, Dict, Tuple
import logging

from readiness.config_loader import ConfidenceThresholds, ScorerConfig
from readiness.records import BusinessProfile
from readiness.scorer.models import Confidence
from readiness.scorer.vocabulary import CRITICAL_FIELDS, OPTIONAL_FIELDS
from readiness.utils import is_present, round_half_up

logger = logging.getLogger(__name__)


def calculate_data_completeness(
    profile: BusinessProfile,
    config: ScorerConfig
) -> Tuple[int, Dict[str, Any]]:
    """Calculate the 0-100 completeness of a profile.

    Args:
        profile: Business profile being scored
        config: Scorer config holding the critical/optional split

    Returns:
        Tuple of (completeness, details with the present/missing field names)
    """
    critical_present = [f for f in CRITICAL_FIELDS if is_present(getattr(profile, f))]
    optional_present = [f for f in OPTIONAL_FIELDS if is_present(getattr(profile, f))]

    critical_ratio = len(critical_present) / len(CRITICAL_FIELDS)
    optional_ratio = len(optional_present) / len(OPTIONAL_FIELDS)

    completeness = round_half_up(
        critical_ratio * config.critical_fields_weight
        + optional_ratio * config.optional_fields_weight
    )

    details = {
        'critical_present': critical_present,
        'critical_missing': [f for f in CRITICAL_FIELDS if f not in critical_present],
        'optional_present': optional_present,
        'optional_missing': [f for f in OPTIONAL_FIELDS if f not in optional_present],
    }
    return completeness, details


def determine_confidence(
    completeness: int,
    overall_score: int,
    thresholds: ConfidenceThresholds
) -> Confidence:
    if completeness >= thresholds.high_completeness and overall_score >= thresholds.high_min_score:
        return Confidence.HIGH
    if completeness >= thresholds.medium_completeness or overall_score >= thresholds.medium_min_score:
        return Confidence.MEDIUM
    return Confidence.LOW
