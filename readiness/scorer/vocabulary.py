"""
Keyword vocabularies and static weight tables used by the category rules.

All matching against these vocabularies is a case-insensitive substring test
(see readiness.utils.contains_any). Tables are immutable.
"""
from types import MappingProxyType

from readiness.scorer.models import ScoreCategory

# Product-market fit
HIGH_GROWTH_INDUSTRIES = ("technology", "e-commerce", "healthcare", "fintech")
PRIORITY_REGIONS = ("uk", "europe")
NEAR_TERM_TIMELINES = ("3-6", "immediate")
MEDIUM_TERM_TIMELINES = ("6-12",)

# Regulatory
APPROPRIATE_ENTITY_TYPES = ("limited company", "ltd", "plc", "partnership")

# Company size brackets
LARGE_COMPANY_SIZES = ("50+", "51-200", "200+")
MID_COMPANY_SIZES = ("11-50",)
SMALL_COMPANY_SIZES = ("1-10",)

# Operations
LOGISTICS_INVESTMENT_KEYWORDS = ("logistics", "distribution", "warehouse", "fulfillment", "fulfilment")
LOGISTICS_SUPPORT_KEYWORDS = ("logistics", "supply")
TECH_INDUSTRY_KEYWORDS = ("technology", "software", "saas")
AUTOMATION_FEATURE_KEYWORDS = ("payment processing", "crm", "analytics", "automated marketing")
TECH_INVESTMENT_KEYWORDS = ("technology", "automation", "software", "digital")

# Investment
SUBSTANTIAL_BUDGETS = ("100k+", "50k-100k")
MODERATE_BUDGETS = ("10k-50k",)
LIMITED_BUDGETS = ("0-10k",)
STRONG_REVENUES = ("5m+", "1m-5m")
GROWING_REVENUES = ("250k-1m",)
EARLY_REVENUES = ("50k-250k",)

# Industry-specific multipliers on top of the default weight of 1.0.
# Looked up by substring of the industry, first entry wins. Multipliers only scale up.
DEFAULT_CATEGORY_WEIGHT = 1.0

INDUSTRY_WEIGHT_OVERRIDES = MappingProxyType({
    "technology": MappingProxyType({
        ScoreCategory.DIGITAL_READINESS: 1.2,
        ScoreCategory.SCALABILITY_AUTOMATION: 1.15,
        ScoreCategory.INVESTMENT_READINESS: 1.1,
    }),
    "e-commerce": MappingProxyType({
        ScoreCategory.DIGITAL_READINESS: 1.25,
        ScoreCategory.LOGISTICS_POTENTIAL: 1.15,
        ScoreCategory.SCALABILITY_AUTOMATION: 1.1,
    }),
    "manufacturing": MappingProxyType({
        ScoreCategory.REGULATORY_COMPATIBILITY: 1.15,
        ScoreCategory.LOGISTICS_POTENTIAL: 1.2,
        ScoreCategory.INVESTMENT_READINESS: 1.1,
    }),
    "healthcare": MappingProxyType({
        ScoreCategory.REGULATORY_COMPATIBILITY: 1.25,
        ScoreCategory.INVESTMENT_READINESS: 1.15,
    }),
    "financial": MappingProxyType({
        ScoreCategory.REGULATORY_COMPATIBILITY: 1.3,
        ScoreCategory.DIGITAL_READINESS: 1.1,
    }),
})

# Data completeness
CRITICAL_FIELDS = (
    "company_name", "business_description", "industry", "company_size",
    "target_market", "primary_objective", "uk_registered", "business_type",
)
OPTIONAL_FIELDS = (
    "website_url", "online_sales_platform", "social_media_platforms",
    "compliance_completed", "planned_investments", "market_entry_timeline",
)
