"""
Pytest configuration and fixtures.

This file provides pytest-specific fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from readiness.config_loader import EngineConfig
from readiness.matcher import MatchingService
from readiness.scorer import ScoringService
from tests import (
    AS_OF,
    make_profile,
    registered_retail_data,
    sample_partner_pool,
    unregistered_retail_data,
)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: end-to-end tests through the public engine API"
    )


@pytest.fixture(autouse=True)
def _clear_readiness_env(monkeypatch):
    """Keep environment overrides from leaking into tests."""
    for name in ("READINESS_CONFIG", "READINESS_LOG_LEVEL", "READINESS_REQUIRE_VERIFIED_PARTNERS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def engine_config():
    return EngineConfig()


@pytest.fixture
def scoring_service(engine_config):
    return ScoringService(engine_config.scorer)


@pytest.fixture
def matching_service(engine_config):
    return MatchingService(engine_config.matcher)


@pytest.fixture
def unregistered_profile():
    return make_profile(**unregistered_retail_data())


@pytest.fixture
def registered_profile():
    return make_profile(**registered_retail_data())


@pytest.fixture
def unregistered_result(scoring_service, unregistered_profile):
    return scoring_service.score(unregistered_profile, as_of=AS_OF)


@pytest.fixture
def partner_pool():
    return sample_partner_pool()
