"""
Static library of partner case studies, keyed by service category.
"""
from types import MappingProxyType
from typing import Optional
import logging

from readiness.matcher.models import CaseStudy
from readiness.utils import text_of

logger = logging.getLogger(__name__)

CASE_STUDIES = MappingProxyType({
    "legal": (
        CaseStudy(
            title="European E-commerce Company Successfully Enters UK Market",
            industry="E-commerce",
            challenge="French online retailer needed to establish UK subsidiary, navigate post-Brexit "
                      "regulations, and ensure GDPR compliance for UK customers",
            solution="Provided company formation, VAT registration, data protection framework, and "
                     "ongoing regulatory compliance support",
            outcome="£2.5M first-year UK revenue, full regulatory compliance, seamless cross-border operations",
        ),
        CaseStudy(
            title="US SaaS Startup Achieves UK Compliance",
            industry="Technology/SaaS",
            challenge="American software company required FCA authorization for financial data "
                      "processing and UK legal entity setup",
            solution="Established UK limited company, obtained necessary regulatory permissions, "
                     "drafted UK-compliant terms of service",
            outcome="FCA authorization in 6 months, 150+ UK enterprise clients acquired within first year",
        ),
        CaseStudy(
            title="Asian Manufacturing Firm Sets Up UK Distribution",
            industry="Manufacturing",
            challenge="Chinese manufacturer needed UK entity for import compliance, product safety "
                      "certifications, and contract negotiations",
            solution="Company registration, UKCA marking guidance, distribution agreements, "
                     "employment contracts for UK team",
            outcome="Compliant UK operations, 30% reduction in import delays, successful partnerships "
                    "with 5 major UK retailers",
        ),
    ),
    "accounting": (
        CaseStudy(
            title="Tech Startup Secures £1.5M Investment",
            industry="Technology",
            challenge="Seed-stage startup needed financial statements, R&D tax credit claims, and "
                      "investor-ready financials",
            solution="Implemented cloud accounting, prepared HMRC submissions, structured financial "
                     "reporting for investors",
            outcome="£350K recovered in R&D tax credits, successful Series A raise, 40% accounting time savings",
        ),
        CaseStudy(
            title="Retail Business Expands with Tax Efficiency",
            industry="Retail",
            challenge="Growing e-commerce business struggled with VAT compliance across EU sales and "
                      "UK tax optimization",
            solution="VAT registration in multiple jurisdictions, cross-border tax structuring, "
                     "monthly management accounts",
            outcome="25% reduction in tax liability, zero VAT penalties, clear financial visibility "
                    "for expansion decisions",
        ),
        CaseStudy(
            title="Professional Services Firm Achieves Financial Clarity",
            industry="Professional Services",
            challenge="Consulting firm needed better financial controls, payroll setup for 15 "
                      "employees, and quarterly forecasting",
            solution="Automated payroll processing, management accounting dashboards, strategic "
                     "financial planning",
            outcome="Real-time financial insights, 100% payroll accuracy, secured £500K credit facility for growth",
        ),
    ),
    "marketing": (
        CaseStudy(
            title="B2B SaaS Company 10x Lead Generation",
            industry="Technology/B2B",
            challenge="Enterprise software company had minimal UK brand awareness and needed "
                      "qualified lead pipeline",
            solution="LinkedIn advertising, SEO content strategy, account-based marketing campaign, "
                     "conversion optimization",
            outcome="950% increase in qualified leads, £1.2M pipeline generated, 35% conversion rate improvement",
        ),
        CaseStudy(
            title="D2C Brand Achieves £500K Monthly Revenue",
            industry="E-commerce/Consumer Goods",
            challenge="New consumer brand launching in competitive UK market with zero digital presence",
            solution="Influencer partnerships, paid social campaigns, email marketing automation, "
                     "Shopify optimization",
            outcome="50K Instagram followers in 6 months, £500K monthly revenue, 4.2 ROAS on advertising spend",
        ),
        CaseStudy(
            title="Local Service Business Dominates Regional Market",
            industry="Home Services",
            challenge="Service provider struggled with local visibility and online bookings",
            solution="Google My Business optimization, local SEO, review generation, online booking system",
            outcome="Page 1 Google rankings for 25 keywords, 300% increase in booking requests, #1 in local area",
        ),
    ),
    "logistics": (
        CaseStudy(
            title="Fashion Brand Scales UK Distribution",
            industry="Fashion/Apparel",
            challenge="European fashion retailer needed reliable UK fulfillment for next-day delivery promise",
            solution="3PL partnership with UK warehouse, same-day dispatch process, returns management",
            outcome="99.5% on-time delivery rate, 60% reduction in shipping costs, 4.8-star customer satisfaction",
        ),
        CaseStudy(
            title="Electronics Importer Streamlines Customs",
            industry="Electronics/Wholesale",
            challenge="Asian electronics importer faced customs delays and complex import duties post-Brexit",
            solution="Customs brokerage, duty optimization, consolidated shipping, inventory "
                     "management in UK warehouse",
            outcome="75% faster customs clearance, £200K annual duty savings, eliminated stockouts",
        ),
        CaseStudy(
            title="Food & Beverage Brand Achieves Rapid Expansion",
            industry="Food & Beverage",
            challenge="Artisan food producer needed temperature-controlled storage and multi-channel distribution",
            solution="Cold chain logistics, retailer direct delivery, e-commerce fulfillment, inventory forecasting",
            outcome="Distribution in 200+ stores, 99.9% product quality maintenance, 45% logistics cost reduction",
        ),
    ),
})


def find_relevant_case_study(category: str, industry: Optional[str]) -> Optional[CaseStudy]:
    """Pick the case study whose industry tag overlaps the business industry.

    Falls back to the first case study of the category. Categories without a
    library return None.
    """
    studies = CASE_STUDIES.get(category, ())
    if not studies:
        return None

    industry_text = text_of(industry)
    if industry_text:
        for study in studies:
            tag = study.industry.lower()
            if industry_text in tag or tag in industry_text:
                return study

    return studies[0]
