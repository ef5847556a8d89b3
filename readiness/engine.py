#!/usr/bin/env python3
"""
Engine entry points.

compute_score and compute_matches validate their inputs once, up front, and
then delegate to ScoringService / MatchingService. Records may be passed as
typed records or as plain mappings with snake_case or camelCase keys.
"""

from collections.abc import Mapping
from datetime import date
from typing import Any, List, Optional
import logging

from readiness.config_loader import EngineConfig
from readiness.exceptions import InputValidationError
from readiness.matcher import CategoryRecommendation, MatchingService
from readiness.records import BusinessProfile, PartnerRecord, SiteSignals, VerificationRecord
from readiness.scorer import ScoringResult, ScoringService

logger = logging.getLogger(__name__)


def _optional_record(record_type, value: Any):
    if value is None:
        return None
    return record_type.from_input(value)


def _partner_pool(partners: Any) -> List[PartnerRecord]:
    if partners is None:
        return []
    if isinstance(partners, (str, bytes, Mapping)) or not hasattr(partners, '__iter__'):
        raise InputValidationError(
            f"partners must be a sequence of partner records, got {type(partners).__name__}"
        )
    pool = []
    for index, partner in enumerate(partners):
        try:
            pool.append(PartnerRecord.from_input(partner))
        except InputValidationError as e:
            raise InputValidationError(f"Partner #{index}: {e}") from e
    return pool


def compute_score(
    profile: Any,
    verification: Any = None,
    site_signals: Any = None,
    *,
    config: Optional[EngineConfig] = None,
    as_of: Optional[date] = None
) -> ScoringResult:
    """Score a business profile.

    Args:
        profile: BusinessProfile or mapping
        verification: Optional VerificationRecord or mapping
        site_signals: Optional SiteSignals or mapping
        config: Engine configuration, defaults when omitted
        as_of: Reference date for company age, defaults to today

    Raises:
        InputValidationError: if any input is structurally invalid
    """
    business = BusinessProfile.from_input(profile)
    registry = _optional_record(VerificationRecord, verification)
    signals = _optional_record(SiteSignals, site_signals)

    config = config or EngineConfig()
    return ScoringService(config.scorer).score(business, registry, signals, as_of=as_of)


def compute_matches(
    partners: Any,
    profile: Any,
    scoring_result: ScoringResult,
    *,
    config: Optional[EngineConfig] = None
) -> List[CategoryRecommendation]:
    """Rank partners per service category for a scored business.

    An empty partner pool returns an empty list.

    Raises:
        InputValidationError: if partners, profile or scoring_result are structurally invalid
    """
    pool = _partner_pool(partners)
    business = BusinessProfile.from_input(profile)
    if not isinstance(scoring_result, ScoringResult):
        raise InputValidationError(
            f"scoring_result must be a ScoringResult, got {type(scoring_result).__name__}"
        )

    if not pool:
        logger.info("Empty partner pool, no recommendations")
        return []

    config = config or EngineConfig()
    return MatchingService(config.matcher).match(pool, business, scoring_result)
