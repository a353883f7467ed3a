"""
Tests for financial calculation engine.
"""

import math

import pytest

from app.calculations.rates import monthly_rate, real_monthly_rate
from app.calculations.amortization import calculate_payment, summarize_loan
from app.calculations.discounting import calculate_real_cost, present_value_of_annuity
from app.calculations.growth import break_even_rate, compare_investment, future_value
from app.calculations.numeric import divide, power


class TestRates:
    """Test rate conversions."""

    def test_monthly_rate(self):
        """Test annual percent to monthly decimal."""
        assert monthly_rate(12) == pytest.approx(0.01)
        assert monthly_rate(3.5) == pytest.approx(0.035 / 12)

    def test_monthly_rate_zero(self):
        assert monthly_rate(0) == 0

    def test_real_rate_multiplicative_fisher(self):
        """Test real rate uses (1 + n) / (1 + f) - 1, not n - f."""
        real = real_monthly_rate(3.5, 2.5)
        nominal = 3.5 / 1200
        inflation = 2.5 / 1200

        assert real == pytest.approx((1 + nominal) / (1 + inflation) - 1, rel=1e-12)
        # The subtractive approximation is measurably different
        assert abs(real - (nominal - inflation)) > 1e-6

    def test_real_rate_equal_rates(self):
        """Test inflation equal to the nominal rate gives a zero real rate."""
        assert real_monthly_rate(4, 4) == pytest.approx(0.0, abs=1e-15)

    def test_real_rate_negative(self):
        """Test inflation above the nominal rate gives a negative real rate."""
        assert real_monthly_rate(2, 6) < 0


class TestAmortization:
    """Test loan payment calculations."""

    def test_calculate_payment_mortgage(self):
        """Test 180,000 at 3.5% over 30 years."""
        payment = calculate_payment(180000, 3.5, 360)
        assert abs(payment - 808.28) < 0.01

    def test_calculate_payment_large_loan(self):
        """Test monthly payment calculation."""
        # $1M loan at 5% for 30 years
        payment = calculate_payment(1000000, 5, 360)
        # Expected payment around $5,368/month
        assert 5300 < payment < 5500

    def test_summarize_loan_totals(self):
        """Test total paid and total interest of a 30-year mortgage."""
        summary = summarize_loan(180000, 3.5, 360)

        assert summary.total_paid == summary.monthly_payment * 360
        assert summary.total_interest == summary.total_paid - 180000
        assert abs(summary.total_paid - 290981) < 1
        assert abs(summary.total_interest - 110981) < 1

    def test_zero_rate_is_straight_line(self):
        """Test 0% interest divides the principal evenly."""
        assert calculate_payment(10000, 0, 60) == 10000 / 60

        summary = summarize_loan(10000, 0, 60)
        assert summary.total_interest == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.parametrize(
        "principal,months",
        [(0, 360), (-5000, 360), (100000, 0), (100000, -12)],
    )
    def test_degenerate_loan_pays_nothing(self, principal, months):
        """Test zero principal or non-positive term returns 0 instead of raising."""
        assert calculate_payment(principal, 3.5, months) == 0

    def test_positive_rate_has_positive_interest(self):
        summary = summarize_loan(50000, 6.5, 96)
        assert summary.total_interest > 0

    def test_negative_rate_pays_less_than_principal(self):
        """Test negative rates are not rejected."""
        payment = calculate_payment(1200, -6, 12)
        assert 0 < payment < 100

    def test_extreme_negative_rate_does_not_raise(self):
        """Test a -2400% rate (monthly factor of -1) gives -inf, not an error."""
        assert calculate_payment(1000, -2400, 2) == -math.inf


class TestPresentValue:
    """Test annuity discounting."""

    def test_present_value_known_value(self):
        """Test 12 payments of 100 at 1% a month."""
        assert present_value_of_annuity(100, 0.01, 12) == pytest.approx(1125.5077, abs=0.01)

    def test_present_value_no_months(self):
        assert present_value_of_annuity(100, 0.01, 0) == 0
        assert present_value_of_annuity(100, 0.01, -3) == 0

    def test_present_value_near_zero_rate(self):
        """Test rates below the epsilon return the undiscounted sum."""
        assert present_value_of_annuity(250, 1e-13, 24) == 250 * 24
        assert present_value_of_annuity(250, -1e-13, 24) == 250 * 24

    def test_present_value_negative_rate(self):
        """Test a negative rate values the stream above its nominal sum."""
        assert present_value_of_annuity(100, -0.002, 120) > 100 * 120

    @pytest.mark.parametrize(
        "principal,annual_percent,months",
        [(180000, 3.5, 360), (20000, 7.9, 96), (5000, 0.5, 12)],
    )
    def test_present_value_recovers_principal(self, principal, annual_percent, months):
        """Test discounting a loan's payments at its own rate gives back the principal."""
        payment = calculate_payment(principal, annual_percent, months)
        pv = present_value_of_annuity(payment, monthly_rate(annual_percent), months)
        assert pv == pytest.approx(principal, rel=1e-9)

    def test_real_cost_without_inflation(self):
        """Test no inflation means no real overpayment beyond the principal."""
        payment = calculate_payment(180000, 3.5, 360)
        cost = calculate_real_cost(180000, payment, 3.5, 0, 360)

        assert cost.real_monthly_rate == pytest.approx(monthly_rate(3.5))
        assert cost.real_overpayment == pytest.approx(0.0, abs=1e-6)

    def test_real_cost_inflation_equals_rate(self):
        """Test a zero real rate makes the real overpayment the nominal interest."""
        summary = summarize_loan(100000, 4, 240)
        cost = calculate_real_cost(100000, summary.monthly_payment, 4, 4, 240)

        assert cost.present_value_of_payments == pytest.approx(summary.total_paid)
        assert cost.real_overpayment == pytest.approx(summary.total_interest)

    def test_real_cost_rises_with_inflation(self):
        """Test higher inflation lowers the real rate and raises the real overpayment."""
        payment = calculate_payment(180000, 3.5, 360)
        low = calculate_real_cost(180000, payment, 3.5, 1.0, 360)
        high = calculate_real_cost(180000, payment, 3.5, 5.0, 360)

        assert high.real_monthly_rate < low.real_monthly_rate
        assert high.real_overpayment > low.real_overpayment
        assert high.real_overpayment == pytest.approx(
            present_value_of_annuity(payment, real_monthly_rate(3.5, 5.0), 360) - 180000
        )


class TestGrowth:
    """Test future value and break-even rate."""

    def test_future_value(self):
        assert future_value(100000, 10, 10) == pytest.approx(259374.25, abs=0.01)

    @pytest.mark.parametrize("annual_percent", [0, 5, 55, -20])
    def test_future_value_zero_years(self, annual_percent):
        """Test nothing compounds over zero years."""
        assert future_value(12345, annual_percent, 0) == 12345

    def test_future_value_fractional_years(self):
        assert future_value(100, 10, 0.5) == pytest.approx(100 * 1.1**0.5)

    def test_future_value_undefined_is_nan(self):
        """Test a rate below -100% with fractional years gives nan, not complex."""
        assert math.isnan(future_value(100, -250, 0.5))

    def test_break_even_rate(self):
        assert break_even_rate(150000, 100000, 10) == pytest.approx(4.138, abs=1e-3)

    @pytest.mark.parametrize("years", [1, 8, 30, 2.5])
    def test_break_even_rate_no_interest(self, years):
        """Test repaying exactly the principal breaks even at 0%."""
        assert break_even_rate(80000, 80000, years) == 0

    @pytest.mark.parametrize(
        "principal,years", [(0, 10), (-100, 10), (100000, 0), (100000, -1)]
    )
    def test_break_even_rate_undefined(self, principal, years):
        assert break_even_rate(150000, principal, years) == 0

    def test_break_even_rate_below_principal(self):
        """Test a total below the principal yields a negative rate."""
        rate = break_even_rate(90000, 100000, 5)
        assert rate == pytest.approx((0.9**0.2 - 1) * 100)
        assert rate < 0

    def test_break_even_rate_matches_future_value(self):
        """Test investing at the break-even rate grows to the total paid."""
        summary = summarize_loan(180000, 3.5, 360)
        rate = break_even_rate(summary.total_paid, 180000, 30)
        assert future_value(180000, rate, 30) == pytest.approx(summary.total_paid)

    def test_compare_investment(self):
        comparison = compare_investment(100000, 10, 10, 150000)

        assert comparison.future_value == pytest.approx(259374.25, abs=0.01)
        assert comparison.net_gain_or_loss == pytest.approx(109374.25, abs=0.01)
        assert comparison.break_even_rate == pytest.approx(4.138, abs=1e-3)


class TestNumeric:
    """Test total arithmetic helpers."""

    def test_divide_by_zero(self):
        assert divide(1, 0) == math.inf
        assert divide(-1, 0) == -math.inf
        assert math.isnan(divide(0, 0))

    def test_power_regular(self):
        assert power(1.1, 10) == pytest.approx(1.1**10)
        assert power(-0.5, -3) == pytest.approx(-8.0)

    def test_power_negative_base_fractional_exponent(self):
        assert math.isnan(power(-2, 0.5))

    def test_power_zero_base_negative_exponent(self):
        assert power(0, -2) == math.inf

    def test_power_overflow(self):
        assert power(10.0, 400) == math.inf
        assert power(-10.0, 401) == -math.inf

    def test_power_negative_zero_base(self):
        """Test -0.0 to a negative odd power is -inf, to an even power +inf."""
        assert power(-0.0, -3) == -math.inf
        assert power(-0.0, -2) == math.inf
        assert power(0.0, -3) == math.inf
