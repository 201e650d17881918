"""
Pydantic models for home purchase scenarios.

This module defines the input snapshot consumed by the projection engine. All
sections are immutable value objects; callers build a fresh ScenarioInput for
every change and the engine never mutates it.

Ranges are not enforced here. The engine degrades gracefully on
nonsensical values (negative prices, zero terms) and sanitising inputs is the
caller's job.
"""

import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PropertyDetails(BaseModel):
    """The property being purchased and its running costs."""

    model_config = ConfigDict(frozen=True)

    price: float = Field(..., description="Purchase price")
    closing_costs: float = Field(
        default=0, description="Closing costs as a percentage of the price"
    )
    growth: float = Field(default=0, description="Annual nominal growth (%)")
    maintenance: float = Field(
        default=0, description="Annual maintenance in year-0 money"
    )
    taxes: float = Field(default=0, description="Annual property taxes in year-0 money")


class MortgageTerms(BaseModel):
    """Mortgage principal, term and rate options."""

    model_config = ConfigDict(frozen=True)

    amount: float = Field(..., description="Loan principal")
    term: float = Field(..., description="Loan term in years (may be fractional)")
    type: Literal["fixed", "variable"] = Field(
        default="fixed", description="Rate type"
    )
    fixed_rate: float = Field(default=0, description="Fixed annual rate (%)")
    var_current: float = Field(default=0, description="Current variable rate (%)")
    var_expected: float = Field(
        default=0, description="Expected average variable rate (%)"
    )

    @property
    def months(self) -> int:
        """Number of monthly payments, floor(term * 12), never negative."""
        return max(0, math.floor(self.term * 12))


class InvestingAssumptions(BaseModel):
    """Market and inflation assumptions."""

    model_config = ConfigDict(frozen=True)

    annual_return: float = Field(default=0, description="Nominal annual return (%)")
    inflation: float = Field(default=0, description="Annual inflation (%)")
    invest_upfront: bool = Field(
        default=False,
        description="Invest the loan amount plus closing costs instead of paying cash",
    )


class BuyerProfile(BaseModel):
    """Household affordability inputs."""

    model_config = ConfigDict(frozen=True)

    net_income: float = Field(default=0, description="Net monthly income")
    age: int = Field(default=0, description="Age of the buyer")
    other_debts_monthly: float = Field(
        default=0, description="Other monthly debt payments"
    )


class PledgeTerms(BaseModel):
    """Securities pledged as collateral against part of the purchase."""

    model_config = ConfigDict(frozen=True)

    amount: float = Field(default=0, description="Pledged (borrowed) amount")
    ltv: float = Field(default=50, description="Loan-to-value limit (%)")


class ScenarioInput(BaseModel):
    """Complete snapshot of a home purchase scenario."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "property": {
                    "price": 350000,
                    "closing_costs": 10,
                    "growth": 0,
                    "maintenance": 800,
                    "taxes": 600,
                },
                "mortgage": {
                    "amount": 200000,
                    "term": 30,
                    "type": "fixed",
                    "fixed_rate": 2.5,
                    "var_current": 3.8,
                    "var_expected": 2.5,
                },
                "investing": {
                    "annual_return": 7.0,
                    "inflation": 2.5,
                    "invest_upfront": True,
                },
                "profile": {"net_income": 2500, "age": 30, "other_debts_monthly": 0},
                "pledge": {"amount": 0, "ltv": 50},
            }
        },
    )

    property: PropertyDetails = Field(..., description="Property being purchased")
    mortgage: MortgageTerms = Field(..., description="Mortgage terms")
    investing: InvestingAssumptions = Field(
        default_factory=InvestingAssumptions, description="Market assumptions"
    )
    profile: BuyerProfile = Field(
        default_factory=BuyerProfile, description="Buyer affordability profile"
    )
    pledge: PledgeTerms = Field(
        default_factory=PledgeTerms, description="Pledged securities"
    )


def upfront_investment_amount(scenario: ScenarioInput) -> float:
    """
    Amount invested at purchase time when the buyer finances instead of paying cash.

    This is the loan amount plus closing costs, and doubles as the collateral
    backing any pledge.
    """
    if not scenario.investing.invest_upfront:
        return 0.0
    closing_costs = scenario.property.price * (scenario.property.closing_costs / 100)
    return scenario.mortgage.amount + closing_costs


def default_scenario() -> ScenarioInput:
    """Initial scenario shown before the user changes anything."""
    return ScenarioInput(
        property=PropertyDetails(
            price=350000, closing_costs=10, growth=0, maintenance=800, taxes=600
        ),
        mortgage=MortgageTerms(
            amount=200000,
            term=30,
            type="fixed",
            fixed_rate=2.5,
            var_current=3.8,
            var_expected=2.5,
        ),
        investing=InvestingAssumptions(
            annual_return=7.0, inflation=2.5, invest_upfront=True
        ),
        profile=BuyerProfile(net_income=2500, age=30, other_debts_monthly=0),
        pledge=PledgeTerms(amount=0, ltv=50),
    )
