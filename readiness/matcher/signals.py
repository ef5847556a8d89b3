"""
Business signals and vocabularies shared by need alignment, urgency and insights.

Need alignment and urgency must read a business the same way, so the
predicates they share live here rather than in either module.
"""
from types import MappingProxyType

from readiness.records import BusinessProfile
from readiness.utils import contains_any, distinct

# Service categories considered for matching, in output order before ranking
CANDIDATE_CATEGORIES = ("legal", "accounting", "marketing", "logistics", "consulting", "compliance")

DISPLAY_NAMES = MappingProxyType({
    "legal": "Legal & Regulatory Affairs",
    "accounting": "Accounting & Tax Advisory",
    "marketing": "Marketing & Digital Presence",
    "logistics": "Supply Chain & Logistics",
    "consulting": "Strategic Business Consulting",
    "compliance": "Industry Compliance & Certification",
})

PRODUCT_BASED_INDUSTRIES = ("retail", "manufacturing", "ecommerce", "e-commerce", "wholesale", "distribution")
HIGH_COMPLIANCE_INDUSTRIES = ("healthcare", "medical", "pharmaceutical", "finance", "banking", "food", "automotive")

# Geographic relevance
NATIONWIDE_KEYWORDS = ("uk", "nationwide", "remote")
MAJOR_CITIES = ("london", "manchester", "birmingham", "leeds", "glasgow", "edinburgh")

# Business stage: (company size markers, partner specialty markers)
STAGE_KEYWORDS = (
    (("startup", "1-10"), ("startup", "early stage", "seed")),
    (("small", "11-50"), ("sme", "small", "growing")),
    (("medium", "51-200"), ("medium", "scale-up", "mid-market")),
)


def display_name(category: str) -> str:
    return DISPLAY_NAMES.get(category, category.capitalize())


def is_product_based(profile: BusinessProfile) -> bool:
    return contains_any(profile.industry, PRODUCT_BASED_INDUSTRIES)


def is_high_compliance(profile: BusinessProfile) -> bool:
    return contains_any(profile.industry, HIGH_COMPLIANCE_INDUSTRIES)


def compliance_item_count(profile: BusinessProfile) -> int:
    return len(distinct(profile.regulatory_compliance, profile.compliance_completed))
