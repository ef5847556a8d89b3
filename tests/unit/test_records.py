#!/usr/bin/env python3
"""
Tests for input record normalisation.

Malformed optional values degrade to absent; structurally invalid input
raises InputValidationError.
"""

import json
import unittest
from datetime import date

from pydantic import ValidationError

from readiness.exceptions import InputValidationError
from readiness.records import BusinessProfile, PartnerRecord, SiteSignals, VerificationRecord


class TestBusinessProfile(unittest.TestCase):

    def test_accepts_camel_case_keys(self):
        profile = BusinessProfile.from_input({
            "companyName": "Acme",
            "ukRegistered": "Yes",
            "targetRegions": ["UK"],
            "description": "We make things",
            "timeline": "3-6 months",
        })
        self.assertEqual(profile.company_name, "Acme")
        self.assertEqual(profile.uk_registered, "yes")
        self.assertEqual(profile.target_regions, ["UK"])
        self.assertEqual(profile.business_description, "We make things")
        self.assertEqual(profile.market_entry_timeline, "3-6 months")

    def test_malformed_list_degrades_to_empty(self):
        profile = BusinessProfile.from_input({"planned_investments": "logistics"})
        self.assertEqual(profile.planned_investments, [])

    def test_list_items_are_cleaned(self):
        profile = BusinessProfile.from_input({"social_media_platforms": ["LinkedIn", "", 3, "  X "]})
        self.assertEqual(profile.social_media_platforms, ["LinkedIn", "X"])

    def test_yes_no_fields_accept_booleans(self):
        profile = BusinessProfile.from_input({"uk_registered": False, "online_sales_platform": True})
        self.assertTrue(profile.declared_unregistered)
        self.assertTrue(profile.online_sales_enabled)

    def test_numbers_become_text(self):
        profile = BusinessProfile.from_input({"budget": 50000})
        self.assertEqual(profile.budget, "50000")

    def test_non_text_value_degrades_to_none(self):
        profile = BusinessProfile.from_input({"industry": {"name": "retail"}})
        self.assertIsNone(profile.industry)

    def test_year_established_parsing(self):
        self.assertEqual(BusinessProfile.from_input({"year_established": "2015"}).year_established, 2015)
        self.assertIsNone(BusinessProfile.from_input({"year_established": "soon"}).year_established)
        self.assertIsNone(BusinessProfile.from_input({"year_established": 15}).year_established)

    def test_english_website_flag(self):
        self.assertTrue(BusinessProfile.from_input({"has_english_website": "yes"}).has_english_website)
        self.assertFalse(BusinessProfile.from_input({"has_english_website": False}).has_english_website)
        self.assertIsNone(BusinessProfile.from_input({"has_english_website": "maybe"}).has_english_website)

    def test_financial_metrics_must_be_mapping(self):
        self.assertIsNone(BusinessProfile.from_input({"financial_metrics": ["revenue"]}).financial_metrics)
        self.assertEqual(
            BusinessProfile.from_input({"financial_metrics": {"revenue": 10}}).financial_metrics,
            {"revenue": 10},
        )

    def test_unknown_keys_are_ignored(self):
        profile = BusinessProfile.from_input({"company_name": "Acme", "favouriteColour": "blue"})
        self.assertEqual(profile.company_name, "Acme")

    def test_non_mapping_raises(self):
        with self.assertRaises(InputValidationError):
            BusinessProfile.from_input(["not", "a", "profile"])

    def test_from_input_returns_existing_instance(self):
        profile = BusinessProfile(company_name="Acme")
        self.assertIs(BusinessProfile.from_input(profile), profile)

    def test_profile_is_frozen(self):
        profile = BusinessProfile(company_name="Acme")
        with self.assertRaises(ValidationError):
            profile.company_name = "Other"


class TestVerificationRecord(unittest.TestCase):

    def test_registry_payload_shape(self):
        record = VerificationRecord.from_input({
            "verified": True,
            "companyNumber": "01234567",
            "insights": {"ageInYears": 7},
        })
        self.assertTrue(record.verified)
        self.assertEqual(record.company_number, "01234567")
        self.assertEqual(record.age_on(date(2024, 1, 1)), 7)

    def test_age_derived_from_creation_date(self):
        record = VerificationRecord.from_input({"verified": True, "dateOfCreation": "2020-09-15"})
        self.assertEqual(record.age_on(date(2024, 6, 1)), 3)
        self.assertEqual(record.age_on(date(2024, 9, 15)), 4)

    def test_age_unknown_without_data(self):
        record = VerificationRecord(verified=True)
        self.assertIsNone(record.age_on(date(2024, 6, 1)))

    def test_bad_date_degrades_to_none(self):
        record = VerificationRecord.from_input({"verified": True, "date_of_creation": "last spring"})
        self.assertIsNone(record.date_of_creation)


class TestSiteSignals(unittest.TestCase):

    def test_flattens_extractor_payload(self):
        signals = SiteSignals.from_input({
            "content": "x" * 900,
            "structure": {"hasNavigation": True, "hasContactForm": True, "languages": ["en", "de"]},
            "ecommerce": {"hasShoppingCart": True},
            "trustSignals": {"hasSSL": True},
            "ukAlignment": {"hasPoundsGBP": True, "hasUKAddress": False},
        })
        self.assertEqual(signals.content_length, 900)
        self.assertTrue(signals.has_navigation)
        self.assertTrue(signals.has_contact_form)
        self.assertEqual(signals.languages, ["en", "de"])
        self.assertTrue(signals.has_shopping_cart)
        self.assertTrue(signals.has_ssl)
        self.assertTrue(signals.has_local_currency)
        self.assertFalse(signals.has_local_address)
        self.assertTrue(signals.analysed)

    def test_failed_scrape_is_not_analysed(self):
        for status in ("failed", "Timeout", "blocked"):
            self.assertFalse(SiteSignals.from_input({"scraping_status": status}).analysed)


class TestNonFiniteNumbers(unittest.TestCase):

    NON_FINITE = (float("inf"), "1e400", "-inf", float("nan"))

    def test_year_established(self):
        for value in self.NON_FINITE:
            with self.subTest(value=value):
                self.assertIsNone(BusinessProfile.from_input({"year_established": value}).year_established)

    def test_json_infinity(self):
        data = json.loads('{"yearEstablished": Infinity}')
        self.assertIsNone(BusinessProfile.from_input(data).year_established)

    def test_content_length(self):
        for value in self.NON_FINITE:
            with self.subTest(value=value):
                self.assertEqual(SiteSignals.from_input({"content_length": value}).content_length, 0)

    def test_age_in_years(self):
        for value in self.NON_FINITE:
            with self.subTest(value=value):
                record = VerificationRecord.from_input({"verified": True, "age_in_years": value})
                self.assertIsNone(record.age_in_years)


class TestPartnerRecord(unittest.TestCase):

    def test_category_is_lowercased(self):
        partner = PartnerRecord.from_input({"name": "Smith Legal", "category": "Legal"})
        self.assertEqual(partner.category, "legal")

    def test_missing_name_raises(self):
        with self.assertRaises(InputValidationError) as ctx:
            PartnerRecord.from_input({"category": "legal"})
        self.assertIsInstance(ctx.exception.__cause__, ValidationError)

    def test_blank_category_raises(self):
        with self.assertRaises(InputValidationError):
            PartnerRecord.from_input({"name": "Smith Legal", "category": "  "})

    def test_verification_status(self):
        partner = PartnerRecord.from_input({
            "name": "Smith Legal", "category": "legal", "verificationStatus": "Verified",
        })
        self.assertTrue(partner.is_verified)


if __name__ == '__main__':
    unittest.main()
