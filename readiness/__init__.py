"""
Readiness engine - evidence-based UK market readiness scoring and partner matching.

Public API:
- compute_score: Score a business profile
- compute_matches: Rank service partners for a scored business
- load_config: Load EngineConfig from YAML
"""

from readiness.config_loader import EngineConfig, load_config
from readiness.engine import compute_matches, compute_score

__all__ = ['compute_score', 'compute_matches', 'load_config', 'EngineConfig']
