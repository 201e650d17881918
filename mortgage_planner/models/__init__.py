"""Data models and calculation engine for home purchase scenarios."""

from .scenario import (
    BuyerProfile,
    InvestingAssumptions,
    MortgageTerms,
    PledgeTerms,
    PropertyDetails,
    ScenarioInput,
    default_scenario,
    upfront_investment_amount,
)
from .rates import RateSet, resolve_rates
from .payment import (
    InvalidPeriodError,
    PaymentTiming,
    compute_payment,
    monthly_payment,
)
from .mortgage_amortization import (
    AmortizationEntry,
    AmortizationSummary,
    YearlyAmortization,
    build_amortization_schedule,
    summarize_schedule,
    yearly_totals,
)
from .projection import (
    MAX_PROJECTION_YEARS,
    PLEDGE_APR,
    ProjectionPoint,
    build_projections,
    pledge_monthly_cost,
)
from .result import (
    AffordabilityMetrics,
    PaymentSummary,
    RiskAssessment,
    ScenarioResult,
)

__all__ = [
    "ScenarioInput",
    "PropertyDetails",
    "MortgageTerms",
    "InvestingAssumptions",
    "BuyerProfile",
    "PledgeTerms",
    "default_scenario",
    "upfront_investment_amount",
    "RateSet",
    "resolve_rates",
    "InvalidPeriodError",
    "PaymentTiming",
    "compute_payment",
    "monthly_payment",
    "AmortizationEntry",
    "AmortizationSummary",
    "YearlyAmortization",
    "build_amortization_schedule",
    "summarize_schedule",
    "yearly_totals",
    "MAX_PROJECTION_YEARS",
    "PLEDGE_APR",
    "ProjectionPoint",
    "build_projections",
    "pledge_monthly_cost",
    "AffordabilityMetrics",
    "PaymentSummary",
    "RiskAssessment",
    "ScenarioResult",
]
