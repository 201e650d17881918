"""
Scenario result model.

This module provides the value object returned by the scenario orchestrator and
consumed by charts, tables and summary cards: resolved rates, payment summary,
yearly projections, pledge risk and affordability metrics.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .projection import ProjectionPoint
from .rates import RateSet


class PaymentSummary(BaseModel):
    """Monthly payment figures for the scenario."""

    model_config = ConfigDict(frozen=True)

    monthly: float = Field(..., description="Monthly mortgage payment, rounded to cents")
    stress: float = Field(..., description="Monthly payment at the stress rate")
    total_monthly_outflow: float = Field(
        ...,
        description="Mortgage + pledge interest + other debts + maintenance + taxes",
    )
    total_monthly_property_expenses: float = Field(
        ..., description="Monthly maintenance"
    )


class RiskAssessment(BaseModel):
    """Collateral-call risk on pledged securities."""

    model_config = ConfigDict(frozen=True)

    current_ltv: float = Field(
        ..., description="Pledge as a percentage of the invested collateral"
    )
    is_pledge_risk: bool = Field(
        ..., description="Whether the current LTV exceeds the configured limit"
    )


class AffordabilityMetrics(BaseModel):
    """Outflow relative to net income."""

    model_config = ConfigDict(frozen=True)

    debt_to_income: float = Field(
        ..., description="Total monthly outflow / net monthly income (0 if no income)"
    )
    runway_months: float = Field(
        ..., description="Net monthly income / total monthly outflow (0 if no outflow)"
    )
    prefers_investing: bool = Field(
        ..., description="Whether the expected return beats the effective mortgage rate"
    )


class ScenarioResult(BaseModel):
    """Complete evaluation of a home purchase scenario."""

    model_config = ConfigDict(frozen=True)

    rates: RateSet = Field(..., description="Resolved mortgage rates")
    payments: PaymentSummary = Field(..., description="Monthly payment figures")
    projections: List[ProjectionPoint] = Field(
        default_factory=list, description="Yearly projections in order"
    )
    risk: RiskAssessment = Field(..., description="Pledge risk assessment")
    affordability: AffordabilityMetrics = Field(
        ..., description="Affordability metrics"
    )

    def projection_for_year(self, year: int) -> ProjectionPoint:
        """
        Projection snapshot for a given year, clamped to the available horizon.

        Raises:
            ValueError: If there are no projections
        """
        if not self.projections:
            raise ValueError("Scenario has no projections")
        index = min(max(year, 1), len(self.projections)) - 1
        return self.projections[index]
