"""
Periodic payment (PMT) calculation for amortizing loans.

The compound factor is computed with Decimal so repeated exponentiation over
hundreds of periods does not accumulate floating-point error. Callers decide
how to round the returned Decimal.
"""

from decimal import ROUND_HALF_UP, Decimal
from enum import IntEnum
from typing import Union

Number = Union[int, float, str, Decimal]

CENT = Decimal("0.01")


class PaymentTiming(IntEnum):
    """When payments fall within each period."""

    END_OF_PERIOD = 0
    BEGINNING_OF_PERIOD = 1


class InvalidPeriodError(ValueError):
    """Raised when a payment is requested over zero periods."""


def _to_decimal(value: Number) -> Decimal:
    # str() keeps the shortest float repr instead of the full binary expansion
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compute_payment(
    rate: Number,
    periods: Number,
    present_value: Number,
    future_value: Number = 0,
    timing: PaymentTiming = PaymentTiming.END_OF_PERIOD,
) -> Decimal:
    """
    Calculate the fixed periodic payment of an amortizing loan.

    Args:
        rate: Interest rate per period (e.g. 0.05 / 12)
        periods: Total number of periods
        present_value: Loan principal
        future_value: Balance left after the last payment
        timing: Whether payments are made at the end or the beginning of a period

    Returns:
        Payment as a negative Decimal (cash outflow)

    Raises:
        InvalidPeriodError: If periods is zero
    """
    r = _to_decimal(rate)
    n = _to_decimal(periods)
    pv = _to_decimal(present_value)
    fv = _to_decimal(future_value)

    if n.is_zero():
        raise InvalidPeriodError("Number of periods cannot be zero.")

    if r.is_zero():
        return -(pv + fv) / n

    compound_factor = (r + 1) ** n
    payment = r * (pv * compound_factor + fv) / (compound_factor - 1)

    if timing == PaymentTiming.BEGINNING_OF_PERIOD:
        payment = payment / (r + 1)

    return -payment


def round_to_cents(amount: Decimal) -> Decimal:
    """Round a Decimal amount half-up to two decimal places."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def monthly_payment(rate: Number, periods: Number, principal: Number) -> float:
    """
    Payment used throughout the projections: rounded to cents, as a positive float.

    Raises:
        InvalidPeriodError: If periods is zero
    """
    return abs(float(round_to_cents(compute_payment(rate, periods, principal))))
