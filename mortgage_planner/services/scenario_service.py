"""
Scenario service for evaluating home purchase scenarios.

This service composes the rate resolver, payment calculator and projection
engine into a single ScenarioResult. It holds no state between calls; every
evaluation is a full recomputation from the ScenarioInput it is given.
"""

import logging
from typing import Optional

from mortgage_planner.models.mortgage_amortization import (
    AmortizationSummary,
    build_amortization_schedule,
    summarize_schedule,
)
from mortgage_planner.models.payment import monthly_payment
from mortgage_planner.models.projection import (
    DEFAULT_PROJECTION_YEARS,
    build_projections,
    pledge_monthly_cost,
)
from mortgage_planner.models.rates import RateSet, resolve_rates
from mortgage_planner.models.result import (
    AffordabilityMetrics,
    PaymentSummary,
    RiskAssessment,
    ScenarioResult,
)
from mortgage_planner.models.scenario import ScenarioInput, upfront_investment_amount

logger = logging.getLogger(__name__)


class ScenarioService:
    """Service for evaluating home purchase scenarios."""

    def __init__(self, projection_years: int = DEFAULT_PROJECTION_YEARS) -> None:
        """Initialize the scenario service.

        Args:
            projection_years: Default projection horizon in years
        """
        self.projection_years = projection_years
        self.logger = logging.getLogger(__name__)

    def evaluate(
        self, scenario: ScenarioInput, years: Optional[int] = None
    ) -> ScenarioResult:
        """Evaluate payments, projections and risk for a scenario.

        The amortization schedule is not built here; see amortization().

        Args:
            scenario: Scenario to evaluate
            years: Projection horizon, defaults to the service horizon

        Returns:
            ScenarioResult for the scenario

        Raises:
            InvalidPeriodError: If the mortgage term has zero months
        """
        if years is None:
            years = self.projection_years

        rates = resolve_rates(scenario.mortgage)
        payments = self._payment_summary(scenario, rates)

        self.logger.debug(
            f"Evaluating {scenario.mortgage.type} mortgage of {scenario.mortgage.amount} "
            f"at {rates.effective_rate}% over {years} years: payment {payments.monthly}"
        )

        projections = build_projections(
            scenario, payments.monthly, rates.monthly_rate, years
        )

        return ScenarioResult(
            rates=rates,
            payments=payments,
            projections=projections,
            risk=assess_pledge_risk(scenario),
            affordability=self._affordability(scenario, rates, payments),
        )

    def amortization(self, scenario: ScenarioInput) -> AmortizationSummary:
        """Build the monthly amortization schedule at the effective rate.

        Raises:
            InvalidPeriodError: If the mortgage term has zero months
        """
        rates = resolve_rates(scenario.mortgage)
        payment = monthly_payment(
            rates.monthly_rate, scenario.mortgage.term * 12, scenario.mortgage.amount
        )
        schedule = build_amortization_schedule(scenario, payment, rates.monthly_rate)
        return summarize_schedule(schedule)

    def _payment_summary(
        self, scenario: ScenarioInput, rates: RateSet
    ) -> PaymentSummary:
        total_months = scenario.mortgage.term * 12

        monthly = monthly_payment(
            rates.monthly_rate, total_months, scenario.mortgage.amount
        )
        stress = monthly_payment(
            rates.stress_monthly_rate, total_months, scenario.mortgage.amount
        )

        other_debts = scenario.profile.other_debts_monthly
        total_monthly_outflow = (
            monthly
            + pledge_monthly_cost(scenario.pledge.amount)
            + other_debts
            + scenario.property.maintenance / 12
            + scenario.property.taxes / 12
        )

        return PaymentSummary(
            monthly=monthly,
            stress=stress,
            total_monthly_outflow=total_monthly_outflow,
            total_monthly_property_expenses=scenario.property.maintenance / 12,
        )

    def _affordability(
        self, scenario: ScenarioInput, rates: RateSet, payments: PaymentSummary
    ) -> AffordabilityMetrics:
        income = scenario.profile.net_income
        outflow = payments.total_monthly_outflow

        return AffordabilityMetrics(
            debt_to_income=outflow / income if income > 0 else 0.0,
            runway_months=income / outflow if outflow > 0 else 0.0,
            prefers_investing=scenario.investing.annual_return > rates.effective_rate,
        )


def assess_pledge_risk(scenario: ScenarioInput) -> RiskAssessment:
    """
    Compare the pledge against the collateral invested upfront.

    Args:
        scenario: Scenario with pledge and investing parameters

    Returns:
        RiskAssessment with the current LTV (%) and whether it breaches the limit
    """
    collateral = upfront_investment_amount(scenario)
    pledge_amount = scenario.pledge.amount

    if pledge_amount > 0 and collateral > 0:
        current_ltv = pledge_amount / collateral * 100
    else:
        current_ltv = 0.0

    return RiskAssessment(
        current_ltv=current_ltv, is_pledge_risk=current_ltv > scenario.pledge.ltv
    )


def evaluate_scenario(
    scenario: ScenarioInput, years: int = DEFAULT_PROJECTION_YEARS
) -> ScenarioResult:
    """Evaluate a scenario with a one-off service instance."""
    return ScenarioService(projection_years=years).evaluate(scenario)
