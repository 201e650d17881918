"""
Time grid and inflation utilities for home purchase projections.

This module converts annual percentages into monthly rates, maps month indices
onto projection years and deflates nominal amounts back to year-0 money.
"""

import math

from pydantic import BaseModel, ConfigDict, Field

MONTHS_PER_YEAR = 12


def monthly_rate_from_annual(annual_pct: float) -> float:
    """
    Convert an annual percentage into the equivalent compounded monthly rate.

    Args:
        annual_pct: Annual rate as a percentage (7.0 = 7%)

    Returns:
        Monthly rate as a decimal, (1 + r) ** (1/12) - 1
    """
    r = (annual_pct or 0) / 100
    return (1 + r) ** (1 / MONTHS_PER_YEAR) - 1


def year_of_month(month: int) -> int:
    """Projection year (1-based) that a 1-based month index falls in."""
    return math.ceil(month / MONTHS_PER_YEAR)


def month_index(year: int, month_of_year: int) -> int:
    """Global 1-based month index for a 1-based year and a 0-based month within it."""
    return (year - 1) * MONTHS_PER_YEAR + month_of_year + 1


def round_currency(amount: float) -> int:
    """Round to the nearest whole currency unit, halves rounding up."""
    return math.floor(amount + 0.5)


class InflationAdjuster(BaseModel):
    """Handles inflation adjustments between nominal and year-0 money."""

    model_config = ConfigDict(frozen=True)

    inflation_pct: float = Field(default=0, description="Annual inflation (%)")

    @property
    def monthly_rate(self) -> float:
        """Compounded monthly inflation rate."""
        return monthly_rate_from_annual(self.inflation_pct)

    def monthly_deflator(self, month: int) -> float:
        """
        Deflator for cash flows at a given month, monthly compounding.

        Dividing a nominal amount paid in that month by this factor gives its
        value in year-0 money.
        """
        return (1 + self.monthly_rate) ** month

    def yearly_deflator(self, year: int) -> float:
        """Deflator for end-of-year balances, annual compounding."""
        return (1 + (self.inflation_pct or 0) / 100) ** year

    def inflate(self, amount: float, months: int) -> float:
        """Grow a year-0 amount with inflation over a number of months."""
        return amount * (1 + self.monthly_rate) ** months

    def to_real_value(self, nominal_amount: float, year: int) -> float:
        """Convert an end-of-year nominal value to year-0 money."""
        return nominal_amount / self.yearly_deflator(year)
