"""
Pydantic models for the plain data records the engine consumes.

Records are built once per request by the caller (from form data, the
registry lookup, the website extractor or the partner store) and are frozen
inside the engine. Both snake_case field names and the camelCase keys used by
the web front end are accepted.

Malformed optional values never raise: they are logged and degraded to the
absent value, so they score exactly like a field that was never filled in.
Only structurally invalid input (not a mapping, a partner without a name or
category) raises InputValidationError.
"""
import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from dateutil.relativedelta import relativedelta
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from readiness.exceptions import InputValidationError

logger = logging.getLogger(__name__)

_TRUE_STRINGS = frozenset({"yes", "y", "true", "1", "on"})
_FALSE_STRINGS = frozenset({"no", "n", "false", "0", "off"})


# ============================================================================
# COERCION HELPERS
# ============================================================================

def _as_text(value: Any, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        logger.warning("Ignoring boolean value for text field %s", field_name)
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value.strip()
    logger.warning("Ignoring %s value for text field %s", type(value).__name__, field_name)
    return None


def _as_string_list(value: Any, field_name: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple, set, frozenset)):
        logger.warning("Ignoring %s value for list field %s", type(value).__name__, field_name)
        return []
    items = []
    for item in value:
        if isinstance(item, str) and item.strip():
            items.append(item.strip())
    return items


def _as_flag(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return None


def _as_yes_no(value: Any, field_name: str) -> Optional[str]:
    if isinstance(value, bool):
        return "yes" if value else "no"
    text = _as_text(value, field_name)
    return text.lower() if text is not None else None


def _as_non_negative_int(value: Any, field_name: str) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(float(value))
    except (TypeError, ValueError, OverflowError):
        logger.warning("Ignoring non-numeric value %r for %s", value, field_name)
        return None
    if number < 0:
        logger.warning("Ignoring negative value %r for %s", value, field_name)
        return None
    return number


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @classmethod
    def from_input(cls, value: Any):
        """Accept an instance of the record or a plain mapping."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise InputValidationError(
                f"{cls.__name__} must be a mapping or {cls.__name__}, got {type(value).__name__}"
            )
        try:
            return cls.model_validate(dict(value))
        except ValidationError as e:
            raise InputValidationError(f"Invalid {cls.__name__}: {e}") from e


# ============================================================================
# BUSINESS PROFILE
# ============================================================================

class BusinessProfile(_Record):
    """The business being scored. Every field is optional."""

    # Company basics
    company_name: Optional[str] = None
    business_description: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("business_description", "businessDescription", "description"),
    )
    industry: Optional[str] = None
    company_size: Optional[str] = None
    year_established: Optional[int] = None
    business_type: Optional[str] = None
    uk_registered: Optional[str] = None

    # Market
    target_market: Optional[str] = None
    target_regions: List[str] = Field(default_factory=list)
    current_markets: List[str] = Field(default_factory=list)
    business_goals: Optional[str] = None
    market_entry_timeline: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("market_entry_timeline", "marketEntryTimeline", "timeline"),
    )
    competitive_advantage: Optional[str] = None
    unique_selling_points: Optional[str] = None
    primary_objective: Optional[str] = None

    # Compliance
    compliance_completed: List[str] = Field(default_factory=list)
    regulatory_compliance: List[str] = Field(default_factory=list)
    quality_certifications: List[str] = Field(default_factory=list)
    ip_protection: List[str] = Field(default_factory=list)

    # Digital presence
    website_url: Optional[str] = None
    has_english_website: Optional[bool] = None
    online_sales_platform: Optional[str] = None
    social_media_platforms: List[str] = Field(default_factory=list)
    digital_presence: List[str] = Field(default_factory=list)
    website_features: List[str] = Field(default_factory=list)
    digital_marketing_budget: Optional[str] = None

    # Plans and finances
    planned_investments: List[str] = Field(default_factory=list)
    required_support: List[str] = Field(default_factory=list)
    key_success_metrics: List[str] = Field(default_factory=list)
    budget: Optional[str] = None
    annual_revenue: Optional[str] = None
    financial_projections: Optional[str] = None
    revenue_model: Optional[str] = None
    financial_metrics: Optional[Dict[str, Any]] = None

    @field_validator(
        "company_name", "business_description", "industry", "company_size",
        "business_type", "target_market", "business_goals", "market_entry_timeline",
        "competitive_advantage", "unique_selling_points", "primary_objective",
        "website_url", "digital_marketing_budget", "budget", "annual_revenue",
        "financial_projections", "revenue_model",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value, info):
        return _as_text(value, info.field_name)

    @field_validator(
        "target_regions", "current_markets", "compliance_completed",
        "regulatory_compliance", "quality_certifications", "ip_protection",
        "social_media_platforms", "digital_presence", "website_features",
        "planned_investments", "required_support", "key_success_metrics",
        mode="before",
    )
    @classmethod
    def _coerce_list(cls, value, info):
        return _as_string_list(value, info.field_name)

    @field_validator("uk_registered", "online_sales_platform", mode="before")
    @classmethod
    def _coerce_yes_no(cls, value, info):
        return _as_yes_no(value, info.field_name)

    @field_validator("has_english_website", mode="before")
    @classmethod
    def _coerce_flag(cls, value):
        return _as_flag(value)

    @field_validator("year_established", mode="before")
    @classmethod
    def _coerce_year(cls, value):
        year = _as_non_negative_int(value, "year_established")
        if year is not None and not 1800 <= year <= 9999:
            logger.warning("Ignoring implausible year_established=%r", value)
            return None
        return year

    @field_validator("financial_metrics", mode="before")
    @classmethod
    def _coerce_metrics(cls, value):
        if value is None or isinstance(value, Mapping):
            return dict(value) if value is not None else None
        logger.warning("Ignoring %s value for financial_metrics", type(value).__name__)
        return None

    @property
    def declared_unregistered(self) -> bool:
        """True only when the business explicitly says it is not UK registered."""
        return self.uk_registered == "no"

    @property
    def online_sales_enabled(self) -> bool:
        return self.online_sales_platform == "yes"


# ============================================================================
# REGISTRY VERIFICATION
# ============================================================================

class VerificationRecord(_Record):
    """Third-party confirmation of a company registration."""
    verified: bool = False
    company_number: Optional[str] = None
    company_name: Optional[str] = None
    company_status: Optional[str] = None
    date_of_creation: Optional[date] = None
    age_in_years: Optional[int] = None

    @model_validator(mode="before")
    @classmethod
    def _lift_insights(cls, data):
        # The registry lookup reports age under insights.ageInYears
        if isinstance(data, dict) and isinstance(data.get("insights"), Mapping):
            data = dict(data)
            insights = data.pop("insights")
            for key in ("ageInYears", "age_in_years"):
                if key in insights and "age_in_years" not in data and "ageInYears" not in data:
                    data["age_in_years"] = insights[key]
        return data

    @field_validator("verified", mode="before")
    @classmethod
    def _coerce_verified(cls, value):
        return bool(_as_flag(value))

    @field_validator("company_number", "company_name", "company_status", mode="before")
    @classmethod
    def _coerce_text(cls, value, info):
        return _as_text(value, info.field_name)

    @field_validator("date_of_creation", mode="before")
    @classmethod
    def _coerce_date(cls, value):
        if value is None or isinstance(value, date):
            return value.date() if isinstance(value, datetime) else value
        if isinstance(value, str):
            try:
                return date.fromisoformat(value.strip()[:10])
            except ValueError:
                pass
        logger.warning("Ignoring unparseable date_of_creation=%r", value)
        return None

    @field_validator("age_in_years", mode="before")
    @classmethod
    def _coerce_age(cls, value):
        return _as_non_negative_int(value, "age_in_years")

    def age_on(self, as_of: date) -> Optional[int]:
        """Company age in whole years, preferring the reported age over the creation date."""
        if self.age_in_years is not None:
            return self.age_in_years
        if self.date_of_creation is None:
            return None
        return max(0, relativedelta(as_of, self.date_of_creation).years)


# ============================================================================
# WEBSITE SIGNALS
# ============================================================================

# Extractor keys that do not follow the camelCase convention
_SIGNAL_KEY_MAP = {
    "hasSSL": "has_ssl",
    "hasPoundsGBP": "has_local_currency",
    "hasUKAddress": "has_local_address",
    "hasUKPhone": "has_local_phone",
}
_SIGNAL_GROUPS = ("structure", "ecommerce", "trustSignals", "trust_signals", "ukAlignment", "uk_alignment")
UNANALYSED_STATUSES = frozenset({"failed", "timeout", "blocked"})


class SiteSignals(_Record):
    """Structured facts extracted from the business website."""
    content_length: int = 0
    has_navigation: bool = False
    has_contact_form: bool = False
    has_social_links: bool = False
    languages: List[str] = Field(default_factory=list)
    has_shopping_cart: bool = False
    has_pricing: bool = False
    accepts_payments: bool = False
    has_ssl: bool = False
    has_privacy_policy: bool = False
    has_terms_of_service: bool = False
    has_local_currency: bool = False
    has_local_address: bool = False
    has_local_phone: bool = False
    scraping_status: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_extractor_payload(cls, data):
        if not isinstance(data, dict):
            return data
        flat = {}
        for key, value in data.items():
            if key in _SIGNAL_GROUPS and isinstance(value, Mapping):
                for inner_key, inner_value in value.items():
                    flat.setdefault(_SIGNAL_KEY_MAP.get(inner_key, inner_key), inner_value)
            elif key == "content":
                if isinstance(value, str):
                    flat.setdefault("content_length", len(value))
            else:
                flat[_SIGNAL_KEY_MAP.get(key, key)] = value
        return flat

    @field_validator(
        "has_navigation", "has_contact_form", "has_social_links", "has_shopping_cart",
        "has_pricing", "accepts_payments", "has_ssl", "has_privacy_policy",
        "has_terms_of_service", "has_local_currency", "has_local_address", "has_local_phone",
        mode="before",
    )
    @classmethod
    def _coerce_flag(cls, value):
        return bool(_as_flag(value))

    @field_validator("content_length", mode="before")
    @classmethod
    def _coerce_length(cls, value):
        return _as_non_negative_int(value, "content_length") or 0

    @field_validator("languages", mode="before")
    @classmethod
    def _coerce_languages(cls, value):
        return _as_string_list(value, "languages")

    @field_validator("scraping_status", mode="before")
    @classmethod
    def _coerce_status(cls, value):
        text = _as_text(value, "scraping_status")
        return text.lower() if text else None

    @property
    def analysed(self) -> bool:
        """False when the extractor could not read the site."""
        return self.scraping_status not in UNANALYSED_STATUSES


# ============================================================================
# PARTNERS
# ============================================================================

class PartnerRecord(_Record):
    """A service provider from the partner store."""
    name: str
    category: str
    id: Optional[str] = None
    description: Optional[str] = None
    specialties: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    website_url: Optional[str] = None
    contact_email: Optional[str] = None
    verification_status: Optional[str] = None

    @field_validator("name", "category", mode="before")
    @classmethod
    def _require_text(cls, value, info):
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{info.field_name} must be a non-empty string")
        return value.strip()

    @field_validator("category", mode="after")
    @classmethod
    def _normalise_category(cls, value):
        return value.lower()

    @field_validator("id", "description", "location", "website_url", "contact_email", mode="before")
    @classmethod
    def _coerce_text(cls, value, info):
        return _as_text(value, info.field_name)

    @field_validator("verification_status", mode="before")
    @classmethod
    def _coerce_status(cls, value):
        text = _as_text(value, "verification_status")
        return text.lower() if text else None

    @field_validator("specialties", mode="before")
    @classmethod
    def _coerce_specialties(cls, value):
        return _as_string_list(value, "specialties")

    @property
    def is_verified(self) -> bool:
        return self.verification_status == "verified"
