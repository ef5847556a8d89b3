#!/usr/bin/env python3
"""
Industry weighting and overall aggregation.

Key behavior:
- Each category starts at weight 1.0.
- The first industry override (in table order) whose key is a substring of the
  lower-cased industry replaces the default for the categories it names.
- breakdown = min(100, round_half_up(raw * weight)). Multipliers never reduce.
- Any uplift is recorded as a neutral "Industry Weighting" evidence factor, so the
  clamped evidence sum always equals the weighted breakdown score.
- overall = round_half_up(sum(breakdown * overall weight)) using convex weights.
"""

from typing import Dict, Mapping, Optional, Tuple
import logging

from readiness.config_loader import CategoryWeights
from readiness.scorer.models import ScoreCategory, ScoreFactor
from readiness.scorer.vocabulary import DEFAULT_CATEGORY_WEIGHT, INDUSTRY_WEIGHT_OVERRIDES
from readiness.utils import clamp_score, round_half_up, text_of

logger = logging.getLogger(__name__)


def resolve_industry_weights(
    industry: Optional[str]
) -> Tuple[Dict[ScoreCategory, float], Optional[str]]:
    """Resolve per-category multipliers for an industry.

    Returns:
        Tuple of (weights for all seven categories, matched override key or None)
    """
    weights = {category: DEFAULT_CATEGORY_WEIGHT for category in ScoreCategory}
    industry_text = text_of(industry)
    if not industry_text:
        return weights, None

    for key, overrides in INDUSTRY_WEIGHT_OVERRIDES.items():
        if key in industry_text:
            weights.update(overrides)
            logger.debug(f"Industry '{industry}' matched weight profile '{key}'")
            return weights, key

    return weights, None


def apply_weights(
    raw_scores: Mapping[ScoreCategory, int],
    weights: Mapping[ScoreCategory, float]
) -> Dict[ScoreCategory, int]:
    breakdown = {}
    for category in ScoreCategory:
        weighted = raw_scores.get(category, 0) * weights.get(category, DEFAULT_CATEGORY_WEIGHT)
        breakdown[category] = min(100, round_half_up(weighted))
    return breakdown


def weighting_factor(
    raw: int,
    weighted: int,
    weight: float,
    industry_profile: Optional[str]
) -> Optional[ScoreFactor]:
    """Evidence line for the points an industry multiplier added to a category.

    Keeps the clamped evidence sum equal to the weighted breakdown score.
    """
    uplift = weighted - raw
    if uplift <= 0:
        return None
    return ScoreFactor.neutral(
        "Industry Weighting", uplift,
        f"{industry_profile or 'industry'} weighting x{weight:g} applied to a base score of {raw}"
    )


def calculate_overall_score(
    breakdown: Mapping[ScoreCategory, int],
    overall_weights: CategoryWeights
) -> int:
    weights = overall_weights.model_dump()
    total = sum(breakdown.get(category, 0) * weights[category.value] for category in ScoreCategory)
    return clamp_score(total)
