#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only unit tests
    python -m pytest tests/unit -v

Shared builders for profiles, registry records, website signals and partners
live here so unittest.TestCase classes and pytest fixtures can both use them.
"""

from datetime import date
from typing import Any, Dict

from readiness.records import BusinessProfile, PartnerRecord, SiteSignals, VerificationRecord

# Fixed reference date so company ages never drift
AS_OF = date(2024, 6, 1)

RETAIL_DESCRIPTION = "Independent homeware retailer selling handmade ceramics across Europe."


def unregistered_retail_data(**overrides: Any) -> Dict[str, Any]:
    """Retail business with no UK registration, no website and no compliance work."""
    data = {
        "company_name": "Acme Homeware",
        "business_description": RETAIL_DESCRIPTION,
        "industry": "retail",
        "company_size": "1-10",
        "uk_registered": "no",
        "year_established": 2019,
    }
    data.update(overrides)
    return data


def registered_retail_data(**overrides: Any) -> Dict[str, Any]:
    """Same retailer after registering in the UK and completing compliance work."""
    data = unregistered_retail_data(
        uk_registered="yes",
        target_market="UK",
        primary_objective="Open a UK distribution channel",
        business_type="Ltd",
        website_url="https://acme-homeware.example",
        compliance_completed=["VAT registration", "GDPR policy", "Product safety testing"],
    )
    data.update(overrides)
    return data


def make_profile(**fields: Any) -> BusinessProfile:
    return BusinessProfile(**fields)


def verified_company(age_in_years: int = 5) -> VerificationRecord:
    return VerificationRecord(
        verified=True,
        company_number="12345678",
        company_name="ACME HOMEWARE LTD",
        company_status="active",
        age_in_years=age_in_years,
    )


def full_site_signals(**overrides: Any) -> SiteSignals:
    """Website with every scored signal present (30 points of website quality)."""
    data = {
        "content_length": 2400,
        "has_navigation": True,
        "has_contact_form": True,
        "has_ssl": True,
        "has_shopping_cart": True,
        "has_local_currency": True,
        "has_local_address": True,
        "languages": ["en", "fr"],
        "scraping_status": "success",
    }
    data.update(overrides)
    return SiteSignals(**data)


def make_partner(name: str, category: str, **fields: Any) -> PartnerRecord:
    return PartnerRecord(name=name, category=category, **fields)


def sample_partner_pool():
    """Partner pool covering four categories plus one unknown category."""
    return [
        make_partner("Smith & Co Solicitors", "legal",
                     specialties=["Retail law", "Company formation", "GDPR"],
                     location="London", verification_status="verified"),
        make_partner("Northern Legal", "legal",
                     specialties=["Employment law"],
                     location="Leeds", verification_status="verified"),
        make_partner("Ledger Partners", "accounting",
                     specialties=["VAT", "Startup bookkeeping", "Payroll", "R&D tax credits", "Audit"],
                     location="UK-wide", verification_status="verified"),
        make_partner("Brightside Digital", "marketing",
                     specialties=["Retail ecommerce marketing", "SEO"],
                     location="Manchester", verification_status="pending"),
        make_partner("FastFreight", "logistics",
                     specialties=["Warehousing", "Customs clearance", "Retail fulfilment"],
                     location="Birmingham", verification_status="verified"),
        make_partner("Mystery Services", "catering",
                     specialties=["Events"], location="London"),
    ]
