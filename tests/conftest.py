"""
Pytest configuration and shared fixtures for the home purchase planner tests.
"""

import pytest

from mortgage_planner import create_app
from mortgage_planner.config import reset_global_settings
from mortgage_planner.models.scenario import (
    BuyerProfile,
    InvestingAssumptions,
    MortgageTerms,
    PledgeTerms,
    PropertyDetails,
    ScenarioInput,
    default_scenario,
)


@pytest.fixture(autouse=True)
def app_env(monkeypatch):
    """Provide a valid SECRET_KEY and a fresh global settings instance."""
    monkeypatch.setenv("SECRET_KEY", "test-secret-key-123")
    monkeypatch.setenv("APP_ENV", "testing")
    reset_global_settings()
    yield
    reset_global_settings()


@pytest.fixture
def scenario():
    """Initial scenario: 350k property, 200k fixed mortgage at 2.5% over 30 years."""
    return default_scenario()


@pytest.fixture
def plain_scenario():
    """Scenario without inflation, growth, running costs, investing or pledge."""
    return ScenarioInput(
        property=PropertyDetails(price=250000),
        mortgage=MortgageTerms(amount=200000, term=30, type="fixed", fixed_rate=2.5),
        investing=InvestingAssumptions(annual_return=0, inflation=0, invest_upfront=False),
        profile=BuyerProfile(net_income=4000, age=35),
        pledge=PledgeTerms(amount=0, ltv=50),
    )


@pytest.fixture
def app():
    """Flask application configured for testing."""
    return create_app()


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
