#!/usr/bin/env python3
"""
Matcher Module - Partner ranking per service category.

Public API:
- MatchingService: Main matching service orchestrator
- CategoryRecommendation, PartnerMatch, MatchFactor, CaseStudy, Urgency

Modules:

- models.py: Data structures
- signals.py: Shared business signals and vocabularies
- partner_matcher.py: Five-factor partner scoring
- explainability.py: Tiered justification text
- case_studies.py: Static case study library
- insights.py: Per-category reason, urgency and insights
- service.py: MatchingService orchestrator
"""

from readiness.matcher.models import (
    CaseStudy,
    CategoryRecommendation,
    MatchFactor,
    PartnerMatch,
    Urgency,
)
from readiness.matcher.partner_matcher import PartnerMatcher
from readiness.matcher.service import MatchingService

__all__ = [
    'MatchingService', 'PartnerMatcher', 'CategoryRecommendation', 'PartnerMatch',
    'MatchFactor', 'CaseStudy', 'Urgency',
]
