"""Effective and stress rate resolution for mortgage inputs."""

from pydantic import BaseModel, ConfigDict, Field

from .scenario import MortgageTerms

# Percentage points added to the expected variable rate for the affordability stress test
VARIABLE_STRESS_ADDON = 2.5


class RateSet(BaseModel):
    """Annual and monthly rates derived from the mortgage terms."""

    model_config = ConfigDict(frozen=True)

    effective_rate: float = Field(..., description="Annual rate used for payments (%)")
    stress_rate: float = Field(..., description="Annual stress-test rate (%)")
    monthly_rate: float = Field(..., description="Effective rate per month (decimal)")
    stress_monthly_rate: float = Field(
        ..., description="Stress rate per month (decimal)"
    )


def resolve_rates(mortgage: MortgageTerms) -> RateSet:
    """
    Resolve the effective and stress rates for a mortgage.

    Fixed loans are not stressed. Variable loans use the expected average rate
    and are stressed by a flat add-on. Monthly rates are a simple division of
    the annual percentage, not a compound conversion.

    Args:
        mortgage: Mortgage terms

    Returns:
        RateSet with annual percentages and monthly decimal rates
    """
    if mortgage.type == "fixed":
        effective_rate = mortgage.fixed_rate
        stress_rate = mortgage.fixed_rate
    else:
        effective_rate = mortgage.var_expected
        stress_rate = mortgage.var_expected + VARIABLE_STRESS_ADDON

    return RateSet(
        effective_rate=effective_rate,
        stress_rate=stress_rate,
        monthly_rate=effective_rate / 100 / 12,
        stress_monthly_rate=stress_rate / 100 / 12,
    )
