#!/usr/bin/env python3
"""
Scoring Module - Evidence-based readiness scoring.

Public API:
- ScoringService: Main scoring service orchestrator
- ScoringResult: Dataclass for scoring results

Each readiness category lives in its own module of small rule functions:

- market_fit.py: Product-market fit
- regulatory.py: Regulatory compatibility (uses registry verification)
- digital.py: Digital readiness (uses website signals)
- operations.py: Logistics potential and scalability & automation
- team.py: Founder & team strength
- investment.py: Investment readiness
- weights.py: Industry weighting and overall aggregation
- completeness.py: Data completeness and confidence
- service.py: ScoringService orchestrator
"""

from readiness.scorer.models import (
    CategoryEvidence,
    Confidence,
    Impact,
    ScoreCategory,
    ScoreFactor,
    ScoringResult,
)
from readiness.scorer.service import ScoringService

__all__ = [
    'ScoringService', 'ScoringResult', 'ScoreCategory', 'ScoreFactor',
    'CategoryEvidence', 'Impact', 'Confidence',
]
