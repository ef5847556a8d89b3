#!/usr/bin/env python3
"""
Matcher Models - Data structures for partner matching.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from readiness.records import PartnerRecord


class Urgency(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Higher rank sorts first."""
        return _URGENCY_RANK[self]


_URGENCY_RANK = {Urgency.HIGH: 3, Urgency.MEDIUM: 2, Urgency.LOW: 1}


@dataclass(frozen=True)
class MatchFactor:
    """One weighted sub-score of a partner match with its justification."""
    name: str
    score: int
    weight: float
    explanation: str

    @property
    def weighted_score(self) -> float:
        return self.score * self.weight


@dataclass(frozen=True)
class CaseStudy:
    title: str
    industry: str
    challenge: str
    solution: str
    outcome: str


@dataclass(frozen=True)
class PartnerMatch:
    """A partner scored against one business for one service category."""
    partner: PartnerRecord
    match_score: int
    match_factors: Tuple[MatchFactor, ...]
    recommendation_reason: str
    relevant_case_study: Optional[CaseStudy] = None


@dataclass(frozen=True)
class CategoryRecommendation:
    """Shortlist of partners for one service category."""
    category: str
    display_name: str
    partners: Tuple[PartnerMatch, ...]
    reason: str
    urgency: Urgency
    insights: Tuple[str, ...]
    average_match_score: int
