import yaml
import os
import logging
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, ValidationError, model_validator

from readiness.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

WEIGHT_SUM_TOLERANCE = 1e-6


class CategoryWeights(BaseModel):
    """Convex weights combining the seven category scores into the overall score."""
    product_market_fit: float = 0.20
    regulatory_compatibility: float = 0.18
    digital_readiness: float = 0.15
    logistics_potential: float = 0.12
    scalability_automation: float = 0.12
    founder_team_strength: float = 0.13
    investment_readiness: float = 0.10

    @model_validator(mode="after")
    def _check_convex(self):
        _check_weights("overall_weights", self.model_dump())
        return self


class ConfidenceThresholds(BaseModel):
    """Thresholds for the high/medium/low confidence label."""
    high_completeness: float = 80.0
    high_min_score: float = 30.0
    medium_completeness: float = 60.0
    medium_min_score: float = 50.0


class ScorerConfig(BaseModel):
    """
    Configuration for the ScoringService.

    Category point tables are fixed; only the aggregation weights and
    confidence thresholds are tunable.
    """
    overall_weights: CategoryWeights = Field(default_factory=CategoryWeights)

    # Data completeness split (critical vs optional fields, in points)
    critical_fields_weight: float = 70.0
    optional_fields_weight: float = 30.0

    confidence: ConfidenceThresholds = Field(default_factory=ConfidenceThresholds)

    @model_validator(mode="after")
    def _check_completeness_split(self):
        total = self.critical_fields_weight + self.optional_fields_weight
        if abs(total - 100.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(
                f"critical_fields_weight + optional_fields_weight must equal 100, got {total}"
            )
        return self


class FactorWeights(BaseModel):
    """Weights of the five partner match factors."""
    industry_expertise: float = 0.30
    need_alignment: float = 0.35
    business_stage: float = 0.15
    geographic_relevance: float = 0.10
    service_depth: float = 0.10

    @model_validator(mode="after")
    def _check_convex(self):
        _check_weights("factor_weights", self.model_dump())
        return self


class MatcherConfig(BaseModel):
    """
    Configuration for the MatchingService.

    Handles ranking partners per service category.
    """
    factor_weights: FactorWeights = Field(default_factory=FactorWeights)

    # Partners scoring at or below this are dropped before grouping
    relevance_floor: float = 10.0

    top_n: int = 2
    high_stakes_top_n: int = 3
    high_stakes_categories: List[str] = Field(default_factory=lambda: ["legal", "accounting"])

    # Drop partners whose verification_status is not "verified"
    require_verified: bool = False


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class EngineConfig(BaseModel):
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    matcher: MatcherConfig = Field(default_factory=MatcherConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _check_weights(name: str, weights: Dict[str, float]) -> None:
    negative = {k: v for k, v in weights.items() if v < 0}
    if negative:
        raise ValueError(f"{name} must be non-negative, got {negative}")
    total = sum(weights.values())
    if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
        raise ValueError(f"{name} must sum to 1.0, got {total:.4f}")


def _env_flag(raw: str) -> Optional[bool]:
    value = raw.strip().lower()
    if value in ("true", "1", "yes", "y", "on"):
        return True
    if value in ("false", "0", "no", "n", "off"):
        return False
    return None


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    if not isinstance(data.get(key), dict):
        data[key] = {}
    return data[key]


def load_config(config_path: Optional[str] = None) -> EngineConfig:
    """Load engine configuration from YAML, applying environment overrides.

    A missing file is not fatal: the engine runs with its documented
    defaults. An invalid file raises ConfigurationError.
    """
    config_path = config_path or os.environ.get("READINESS_CONFIG", "config.yaml")

    # If not found at relative path (e.g. running from another directory), try the repo root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", os.path.basename(config_path))

    data: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")
    else:
        logger.warning(f"Config file {config_path} not found, using defaults")

    # Allow env var override for log level
    env_log_level = os.environ.get("READINESS_LOG_LEVEL")
    if env_log_level:
        _section(data, "logging")["level"] = env_log_level.upper()

    # Allow env var override for verified-only partner matching
    env_require_verified = os.environ.get("READINESS_REQUIRE_VERIFIED_PARTNERS")
    if env_require_verified:
        flag = _env_flag(env_require_verified)
        if flag is None:
            logger.warning(
                f"Ignoring READINESS_REQUIRE_VERIFIED_PARTNERS={env_require_verified!r}"
            )
        else:
            _section(data, "matcher")["require_verified"] = flag

    try:
        return EngineConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e
