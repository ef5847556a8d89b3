#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from readiness.utils import clamp_score


class ScoreCategory(str, Enum):
    """The seven readiness dimensions, each scored independently."""
    PRODUCT_MARKET_FIT = "product_market_fit"
    REGULATORY_COMPATIBILITY = "regulatory_compatibility"
    DIGITAL_READINESS = "digital_readiness"
    LOGISTICS_POTENTIAL = "logistics_potential"
    SCALABILITY_AUTOMATION = "scalability_automation"
    FOUNDER_TEAM_STRENGTH = "founder_team_strength"
    INVESTMENT_READINESS = "investment_readiness"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    ScoreCategory.PRODUCT_MARKET_FIT: "Product-Market Fit",
    ScoreCategory.REGULATORY_COMPATIBILITY: "Regulatory Compatibility",
    ScoreCategory.DIGITAL_READINESS: "Digital Readiness",
    ScoreCategory.LOGISTICS_POTENTIAL: "Logistics Potential",
    ScoreCategory.SCALABILITY_AUTOMATION: "Scalability & Automation",
    ScoreCategory.FOUNDER_TEAM_STRENGTH: "Founder & Team Strength",
    ScoreCategory.INVESTMENT_READINESS: "Investment Readiness",
}


class Impact(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ScoreFactor:
    """One evidence line: a signed point contribution and why it was awarded."""
    label: str
    points: int
    impact: Impact
    evidence: str

    @classmethod
    def positive(cls, label: str, points: int, evidence: str) -> "ScoreFactor":
        return cls(label=label, points=points, impact=Impact.POSITIVE, evidence=evidence)

    @classmethod
    def neutral(cls, label: str, points: int, evidence: str) -> "ScoreFactor":
        return cls(label=label, points=points, impact=Impact.NEUTRAL, evidence=evidence)

    @classmethod
    def negative(cls, label: str, points: int, evidence: str) -> "ScoreFactor":
        return cls(label=label, points=-abs(points), impact=Impact.NEGATIVE, evidence=evidence)


@dataclass(frozen=True)
class CategoryEvidence:
    """Factors for one category; score is their sum clamped to [0, 100]."""
    category: ScoreCategory
    score: int
    factors: Tuple[ScoreFactor, ...] = ()

    @property
    def raw_points(self) -> int:
        return sum(f.points for f in self.factors)

    @classmethod
    def from_factors(
        cls,
        category: ScoreCategory,
        factors: Iterable[Optional[ScoreFactor]]
    ) -> "CategoryEvidence":
        kept = tuple(f for f in factors if f is not None)
        return cls(
            category=category,
            score=clamp_score(sum(f.points for f in kept)),
            factors=kept,
        )


@dataclass(frozen=True)
class ScoringResult:
    """Complete scoring result with weighted breakdown and evidence trail.

    Mappings are read-only views; the evidence of each category sums (clamped)
    to its score_breakdown value.
    """
    overall_score: int
    score_breakdown: Mapping[ScoreCategory, int]
    score_evidence: Mapping[ScoreCategory, Tuple[ScoreFactor, ...]]
    confidence_level: Confidence
    data_completeness: int

    # Audit trail for the weighting step
    raw_scores: Mapping[ScoreCategory, int] = field(default_factory=lambda: MappingProxyType({}))
    applied_weights: Mapping[ScoreCategory, float] = field(default_factory=lambda: MappingProxyType({}))
    industry_profile: Optional[str] = None

    def score_for(self, category: ScoreCategory) -> int:
        return self.score_breakdown.get(category, 0)

    def factors_for(self, category: ScoreCategory) -> Tuple[ScoreFactor, ...]:
        return self.score_evidence.get(category, ())

    def breakdown_by_label(self) -> Dict[str, int]:
        return {category.label: score for category, score in self.score_breakdown.items()}
