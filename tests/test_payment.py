"""
Tests for the periodic payment (PMT) calculator.

This module tests the Decimal annuity formula, the zero-rate fallback, the
zero-period failure and annuity-due timing.
"""

from decimal import Decimal

import pytest

from mortgage_planner.models.payment import (
    InvalidPeriodError,
    PaymentTiming,
    compute_payment,
    monthly_payment,
    round_to_cents,
)


class TestComputePayment:
    """Test cases for compute_payment."""

    def test_standard_thirty_year_payment(self):
        """200k at 2.5% over 30 years pays about 790.24 per month."""
        payment = compute_payment(0.025 / 12, 360, 200000)

        assert isinstance(payment, Decimal)
        assert payment < 0
        assert abs(round_to_cents(payment) + Decimal("790.24")) <= Decimal("0.01")

    def test_matches_float_annuity_formula(self):
        """Decimal result agrees with the closed-form annuity formula."""
        r = 0.05 / 12
        n = 300
        pv = 350000
        expected = pv * r * (1 + r) ** n / ((1 + r) ** n - 1)

        payment = compute_payment(r, n, pv)

        assert float(-payment) == pytest.approx(expected, rel=1e-9)

    def test_zero_rate_is_straight_line(self):
        """With no interest the payment is -(pv + fv) / n exactly."""
        payment = compute_payment(0, 360, 200000)

        assert payment == -Decimal(200000) / Decimal(360)

    def test_zero_rate_with_future_value(self):
        """Future value is included in the straight-line payment."""
        payment = compute_payment(0, 10, 1000, 500)

        assert payment == Decimal("-150")

    @pytest.mark.parametrize("rate", [0, 0.01, 0.025 / 12])
    @pytest.mark.parametrize("principal", [0, 1, 200000])
    def test_zero_periods_raises(self, rate, principal):
        """Zero periods always fails, whatever the rate or principal."""
        with pytest.raises(InvalidPeriodError) as exc_info:
            compute_payment(rate, 0, principal)

        assert "periods cannot be zero" in str(exc_info.value)

    def test_invalid_period_error_is_value_error(self):
        """InvalidPeriodError can be handled as a ValueError."""
        with pytest.raises(ValueError):
            compute_payment(0.01, 0, 1000)

    def test_beginning_of_period_divides_by_one_plus_rate(self):
        """Annuity-due payments are the ordinary payment divided by (1 + r)."""
        r = Decimal("0.004")
        end = compute_payment(r, 120, 50000)
        begin = compute_payment(
            r, 120, 50000, timing=PaymentTiming.BEGINNING_OF_PERIOD
        )

        assert begin == end / (1 + r)
        assert abs(begin) < abs(end)

    def test_future_value_increases_payment(self):
        """Paying down to a future value requires a larger payment."""
        base = compute_payment(0.01, 12, 1000)
        with_fv = compute_payment(0.01, 12, 1000, 100)

        assert with_fv < base

    def test_accepts_decimal_and_string_inputs(self):
        """Decimal and string inputs give the same result as floats."""
        from_float = compute_payment(0.005, 240, 100000)
        from_str = compute_payment("0.005", "240", "100000")
        from_decimal = compute_payment(Decimal("0.005"), Decimal(240), Decimal(100000))

        assert from_float == from_str == from_decimal


class TestMonthlyPayment:
    """Test cases for the rounded monthly payment helper."""

    def test_rounded_positive_cents(self):
        """Monthly payment is positive and rounded to cents."""
        payment = monthly_payment(0.025 / 12, 360, 200000)

        assert payment == 790.24

    def test_zero_principal(self):
        """No principal means no payment."""
        assert monthly_payment(0.03 / 12, 360, 0) == 0.0

    def test_round_half_up(self):
        """Halves round away from zero."""
        assert round_to_cents(Decimal("1.005")) == Decimal("1.01")
        assert round_to_cents(Decimal("-1.005")) == Decimal("-1.01")

    def test_zero_periods_propagates(self):
        """The zero-period error reaches callers of the helper."""
        with pytest.raises(InvalidPeriodError):
            monthly_payment(0.01, 0, 1000)
