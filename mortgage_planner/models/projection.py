"""
Year-by-year projections of a home purchase scenario.

The simulation steps month by month (mortgage amortization, pledge interest,
ownership costs, investment growth) and closes out each year with property
growth and a net worth snapshot. Every figure is reported both in nominal
money and in year-0 money.

Monthly cash flows are deflated with monthly-compounded inflation; year-end
balances are deflated with annual-compounded inflation.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .scenario import ScenarioInput, upfront_investment_amount
from .time_grid import (
    MONTHS_PER_YEAR,
    InflationAdjuster,
    month_index,
    monthly_rate_from_annual,
    round_currency,
)

# Annual interest-only rate charged on pledged securities
PLEDGE_APR = 0.045

DEFAULT_PROJECTION_YEARS = 30
MAX_PROJECTION_YEARS = 100


class ProjectionPoint(BaseModel):
    """Snapshot of the scenario at the end of a projection year."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1, description="Projection year (1-based)")

    property_value: int = Field(..., description="Property value")
    balance: int = Field(..., description="Outstanding mortgage balance")
    net_worth: int = Field(..., description="Property - mortgage + investments - pledge")
    total_interest: int = Field(..., description="Cumulative mortgage interest")
    cash_outlay: int = Field(..., description="Cumulative cash paid out")
    investment_value: int = Field(..., description="Value of the upfront investment")

    real_property_value: int = Field(..., description="Property value, year-0 money")
    real_balance: int = Field(..., description="Mortgage balance, year-0 money")
    real_net_worth: int = Field(..., description="Net worth, year-0 money")
    real_total_interest: int = Field(
        ..., description="Cumulative interest, deflated month by month"
    )
    real_cash_outlay: int = Field(
        ..., description="Cumulative cash outlay, deflated month by month"
    )
    real_investment_value: int = Field(
        ..., description="Investment value, year-0 money"
    )


def pledge_monthly_cost(pledge_amount: float) -> float:
    """Interest-only monthly cost of a pledge."""
    return pledge_amount * PLEDGE_APR / 12


def build_projections(
    scenario: ScenarioInput,
    monthly_payment: float,
    monthly_rate: float,
    years: int = DEFAULT_PROJECTION_YEARS,
) -> List[ProjectionPoint]:
    """
    Project property, mortgage, investment and net worth for each year.

    The horizon is independent of the mortgage term, so projections continue
    after the loan is paid off. Mortgage payments are fixed in nominal terms
    while maintenance and taxes rise with inflation. A payment smaller than the
    interest due grows the balance (negative amortization). The pledge is
    interest-only and costs money for the whole horizon.

    Args:
        scenario: Scenario to project
        monthly_payment: Fixed monthly mortgage payment (positive)
        monthly_rate: Mortgage interest rate per month (decimal)
        years: Number of yearly points to produce

    Returns:
        One ProjectionPoint per year, years 1..N in order
    """
    if years <= 0:
        return []

    mortgage_months = scenario.mortgage.months
    horizon_months = years * MONTHS_PER_YEAR

    mortgage_balance = max(0.0, scenario.mortgage.amount)
    property_value = max(0.0, scenario.property.price)
    pledge_amount = max(0.0, scenario.pledge.amount)

    closing_costs = property_value * (scenario.property.closing_costs / 100)
    down_payment = max(0.0, property_value - scenario.mortgage.amount - pledge_amount)

    invested_upfront = upfront_investment_amount(scenario)
    investment_value = invested_upfront

    total_interest = 0.0
    total_cash_outlay = down_payment + closing_costs + invested_upfront

    real_total_interest = 0.0
    real_cash_outlay = total_cash_outlay

    monthly_investment_rate = monthly_rate_from_annual(scenario.investing.annual_return)
    inflation = InflationAdjuster(inflation_pct=scenario.investing.inflation)
    pledge_interest = pledge_monthly_cost(pledge_amount)

    # Maintenance and taxes in year-0 money
    base_monthly_ownership_cost = (
        scenario.property.maintenance + scenario.property.taxes
    ) / 12

    points: List[ProjectionPoint] = []

    for year in range(1, years + 1):
        interest_year = 0.0

        for m in range(MONTHS_PER_YEAR):
            k = month_index(year, m)
            deflator = inflation.monthly_deflator(k)

            if k <= mortgage_months and mortgage_balance > 0:
                interest = mortgage_balance * monthly_rate
                principal = monthly_payment - interest

                total_cash_outlay += monthly_payment
                real_cash_outlay += monthly_payment / deflator

                interest_year += interest
                real_total_interest += interest / deflator

                if principal >= 0:
                    mortgage_balance = max(0.0, mortgage_balance - principal)
                else:
                    mortgage_balance += interest - monthly_payment

            if pledge_amount > 0 and k <= horizon_months:
                total_cash_outlay += pledge_interest
                real_cash_outlay += pledge_interest / deflator

            if base_monthly_ownership_cost > 0:
                cost_nominal = inflation.inflate(base_monthly_ownership_cost, k - 1)
                total_cash_outlay += cost_nominal
                real_cash_outlay += cost_nominal / deflator

            if investment_value > 0:
                investment_value *= 1 + monthly_investment_rate

        total_interest += interest_year
        property_value *= 1 + scenario.property.growth / 100

        net_worth = property_value - mortgage_balance + investment_value - pledge_amount

        points.append(
            ProjectionPoint(
                year=year,
                property_value=round_currency(property_value),
                balance=round_currency(mortgage_balance),
                net_worth=round_currency(net_worth),
                total_interest=round_currency(total_interest),
                cash_outlay=round_currency(total_cash_outlay),
                investment_value=round_currency(investment_value),
                real_property_value=round_currency(
                    inflation.to_real_value(property_value, year)
                ),
                real_balance=round_currency(
                    inflation.to_real_value(mortgage_balance, year)
                ),
                real_net_worth=round_currency(
                    inflation.to_real_value(net_worth, year)
                ),
                real_total_interest=round_currency(real_total_interest),
                real_cash_outlay=round_currency(real_cash_outlay),
                real_investment_value=round_currency(
                    inflation.to_real_value(investment_value, year)
                ),
            )
        )

    return points
