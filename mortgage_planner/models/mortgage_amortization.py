"""
Mortgage amortization calculations for home purchase scenarios.

This module builds the payment-by-payment schedule (interest/principal split and
remaining balance) for the loan term, plus the yearly aggregates shown in the
amortization chart.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .scenario import ScenarioInput
from .time_grid import year_of_month


class AmortizationEntry(BaseModel):
    """Breakdown of a single mortgage payment."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1, description="Payment number (1-based)")
    year: int = Field(..., ge=1, description="Loan year the payment falls in")
    payment: float = Field(..., description="Scheduled payment amount")
    principal: float = Field(..., description="Principal portion of payment")
    interest: float = Field(..., description="Interest portion of payment")
    balance: float = Field(..., ge=0, description="Balance after the payment")


class AmortizationSummary(BaseModel):
    """Totals over a complete amortization schedule."""

    model_config = ConfigDict(frozen=True)

    entries: List[AmortizationEntry] = Field(
        default_factory=list, description="Payment breakdowns in order"
    )
    total_interest: float = Field(default=0, description="Interest over the schedule")
    total_principal: float = Field(
        default=0, description="Principal repaid over the schedule"
    )
    payoff_month: int = Field(
        default=0, ge=0, description="Month of the last payment (0 if none)"
    )


class YearlyAmortization(BaseModel):
    """Principal and interest paid within one loan year."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1, description="Loan year")
    principal: float = Field(..., description="Principal repaid during the year")
    interest: float = Field(..., description="Interest paid during the year")
    ending_balance: float = Field(..., ge=0, description="Balance at year end")


def build_amortization_schedule(
    scenario: ScenarioInput, monthly_payment: float, monthly_rate: float
) -> List[AmortizationEntry]:
    """
    Generate the monthly amortization schedule for the scenario's mortgage.

    The schedule stops at the end of the term or as soon as the balance reaches
    zero. The principal portion is capped at the remaining balance so the final
    payment never overpays.

    Args:
        scenario: Scenario whose mortgage amount and term are amortized
        monthly_payment: Fixed monthly payment (positive)
        monthly_rate: Interest rate per month (decimal)

    Returns:
        List of AmortizationEntry, one per month
    """
    mortgage_months = scenario.mortgage.months
    balance = max(0.0, scenario.mortgage.amount)

    schedule: List[AmortizationEntry] = []
    month = 1
    while month <= mortgage_months and balance > 0:
        interest = balance * monthly_rate
        principal = min(monthly_payment - interest, balance)
        balance = max(0.0, balance - principal)

        schedule.append(
            AmortizationEntry(
                month=month,
                year=year_of_month(month),
                payment=monthly_payment,
                principal=principal,
                interest=interest,
                balance=balance,
            )
        )
        month += 1

    return schedule


def summarize_schedule(schedule: List[AmortizationEntry]) -> AmortizationSummary:
    """Total interest and principal over a schedule and the month it pays off."""
    return AmortizationSummary(
        entries=schedule,
        total_interest=sum(entry.interest for entry in schedule),
        total_principal=sum(entry.principal for entry in schedule),
        payoff_month=schedule[-1].month if schedule else 0,
    )


def yearly_totals(schedule: List[AmortizationEntry]) -> List[YearlyAmortization]:
    """
    Aggregate a monthly schedule into loan years.

    Args:
        schedule: Monthly amortization entries in order

    Returns:
        One YearlyAmortization per loan year present in the schedule
    """
    by_year: Dict[int, List[AmortizationEntry]] = {}
    for entry in schedule:
        by_year.setdefault(entry.year, []).append(entry)

    return [
        YearlyAmortization(
            year=year,
            principal=sum(entry.principal for entry in entries),
            interest=sum(entry.interest for entry in entries),
            ending_balance=entries[-1].balance,
        )
        for year, entries in sorted(by_year.items())
    ]
