"""Tests for the loan calculator."""

from decimal import Decimal

import pytest

from dealership.services.loan_calculator import (
    ESTIMATED_FEE_MARKUP_PERCENT,
    InvalidArgument,
    ZeroRatePolicy,
    calculate_monthly_payment,
    quote_vehicle_financing,
    round_money,
)


class TestAnnuityPayment:
    def test_reference_loan(self):
        quote = calculate_monthly_payment(20000, 6, 60)
        assert quote.monthly_payment == Decimal("386.66")
        assert quote.total_amount == Decimal("23199.60")
        assert quote.total_interest == Decimal("3199.60")

    def test_total_is_payment_times_term(self):
        for principal, rate, term in [(20000, 6, 60), (35500, 8.5, 72), (4999.99, 1, 12)]:
            quote = calculate_monthly_payment(principal, rate, term)
            assert quote.total_amount == quote.monthly_payment * term
            assert quote.total_interest == quote.total_amount - quote.principal

    def test_amounts_have_two_decimals(self):
        quote = calculate_monthly_payment(35500, 8.5, 72)
        for value in (quote.monthly_payment, quote.total_amount, quote.total_interest):
            assert value.as_tuple().exponent == -2

    def test_float_inputs_do_not_leak_binary_noise(self):
        quote = calculate_monthly_payment(20000.0, 6.0, 60)
        assert quote.monthly_payment == Decimal("386.66")

    def test_single_month_term_repays_principal_plus_one_month(self):
        quote = calculate_monthly_payment(1200, 12, 1)
        assert quote.monthly_payment == Decimal("1212.00")
        assert quote.total_interest == Decimal("12.00")

    def test_higher_rate_costs_more(self):
        low = calculate_monthly_payment(20000, 5, 60)
        high = calculate_monthly_payment(20000, 9, 60)
        assert high.monthly_payment > low.monthly_payment
        assert high.total_interest > low.total_interest

    def test_quote_is_finite(self):
        assert calculate_monthly_payment(20000, 6, 60).is_finite


class TestApproximateApr:
    def test_adds_fee_markup(self):
        quote = calculate_monthly_payment(20000, 6, 60)
        assert ESTIMATED_FEE_MARKUP_PERCENT == Decimal("2")
        assert quote.approximate_apr == Decimal("8.00")

    def test_fractional_rate(self):
        assert calculate_monthly_payment(20000, 8.5, 60).approximate_apr == Decimal("10.50")


class TestZeroRate:
    def test_flat_policy_splits_principal(self):
        quote = calculate_monthly_payment(12000, 0, 12)
        assert quote.monthly_payment == Decimal("1000.00")
        assert quote.total_amount == Decimal("12000.00")
        assert quote.total_interest == Decimal("0.00")
        assert quote.approximate_apr == Decimal("2.00")

    def test_flat_policy_rounding_remainder(self):
        quote = calculate_monthly_payment(10000, 0, 3)
        assert quote.monthly_payment == Decimal("3333.33")
        assert quote.total_amount == Decimal("9999.99")
        assert quote.total_interest == Decimal("-0.01")

    def test_non_finite_policy_yields_nan(self):
        quote = calculate_monthly_payment(12000, 0, 12, ZeroRatePolicy.NON_FINITE)
        assert quote.monthly_payment.is_nan()
        assert quote.total_amount.is_nan()
        assert quote.total_interest.is_nan()
        assert quote.approximate_apr == Decimal("2.00")
        assert not quote.is_finite

    def test_policy_accepts_string_value(self):
        quote = calculate_monthly_payment(12000, 0, 12, "non_finite")
        assert quote.monthly_payment.is_nan()

    def test_policy_only_affects_zero_rate(self):
        flat = calculate_monthly_payment(20000, 6, 60, ZeroRatePolicy.FLAT)
        legacy = calculate_monthly_payment(20000, 6, 60, ZeroRatePolicy.NON_FINITE)
        assert flat == legacy


class TestValidation:
    @pytest.mark.parametrize("term", [0, -1, -60])
    def test_non_positive_term(self, term):
        with pytest.raises(InvalidArgument):
            calculate_monthly_payment(20000, 6, term)

    @pytest.mark.parametrize("term", [12.0, "60", None, True])
    def test_term_must_be_integer(self, term):
        with pytest.raises(InvalidArgument):
            calculate_monthly_payment(20000, 6, term)

    @pytest.mark.parametrize("principal", [0, -100])
    def test_non_positive_principal(self, principal):
        with pytest.raises(InvalidArgument):
            calculate_monthly_payment(principal, 6, 60)

    @pytest.mark.parametrize("rate", [-0.5, 100, 150])
    def test_rate_out_of_range(self, rate):
        with pytest.raises(InvalidArgument):
            calculate_monthly_payment(20000, rate, 60)

    @pytest.mark.parametrize("value", ["abc", float("nan"), float("inf"), None])
    def test_non_numeric_principal(self, value):
        with pytest.raises(InvalidArgument):
            calculate_monthly_payment(value, 6, 60)

    def test_invalid_argument_is_value_error(self):
        assert issubclass(InvalidArgument, ValueError)


class TestVehicleFinancing:
    def test_down_payment_reduces_principal(self):
        quote = quote_vehicle_financing(25000, 5000, 60, 6)
        assert quote.principal == Decimal("20000")
        assert quote.monthly_payment == Decimal("386.66")

    def test_no_down_payment(self):
        quote = quote_vehicle_financing(20000, 0, 60, 6)
        assert quote.principal == Decimal("20000")

    def test_down_payment_equal_to_price(self):
        with pytest.raises(InvalidArgument):
            quote_vehicle_financing(20000, 20000, 60, 6)

    def test_negative_down_payment(self):
        with pytest.raises(InvalidArgument):
            quote_vehicle_financing(20000, -1, 60, 6)


class TestRoundMoney:
    def test_half_rounds_away_from_zero(self):
        assert round_money(Decimal("0.125")) == Decimal("0.13")
        assert round_money(Decimal("-0.125")) == Decimal("-0.13")

    def test_nan_passes_through(self):
        assert round_money(Decimal("NaN")).is_nan()

    def test_negative_zero_becomes_zero(self):
        rounded = round_money(Decimal("-0.004"))
        assert str(rounded) == "0.00"
        assert not rounded.is_signed()

    def test_sub_cent_principal_has_unsigned_zero_interest(self):
        quote = calculate_monthly_payment(Decimal("0.001"), 6, 12)
        assert str(quote.total_interest) == "0.00"
        assert not quote.total_interest.is_signed()
