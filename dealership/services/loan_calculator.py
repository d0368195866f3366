"""Fixed-rate amortizing loan calculator for the finance page.

The monthly payment follows the standard annuity formula:

    payment = P * r * (1 + r)^n / ((1 + r)^n - 1)

Where:
- P = financed principal (vehicle price minus down payment)
- r = monthly rate = annual_rate_percent / 100 / 12
- n = term in months

All money is handled as Decimal and rounded half away from zero to cents.
Totals are derived from the rounded payment, so
``total_amount == monthly_payment * term_months`` holds exactly.

The "approximate APR" is the nominal rate plus a flat fee markup. It is a
display placeholder, not an effective-rate computation.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any


# =============================================================================
# CONSTANTS
# =============================================================================

ESTIMATED_FEE_MARKUP_PERCENT = Decimal("2")

MONTHS_PER_YEAR = 12
MAX_ANNUAL_RATE_PERCENT = Decimal("100")

_CENTS = Decimal("0.01")
_NAN = Decimal("NaN")


class InvalidArgument(ValueError):
    """Raised when loan inputs cannot describe a real loan."""


class ZeroRatePolicy(str, Enum):
    """How a 0% nominal rate is priced.

    FLAT splits the principal evenly over the term. NON_FINITE keeps the
    legacy behaviour where the annuity formula divides zero by zero and every
    money field comes out as NaN.
    """

    FLAT = "flat"
    NON_FINITE = "non_finite"


@dataclass(frozen=True)
class LoanQuote:
    principal: Decimal
    annual_rate_percent: Decimal
    term_months: int
    monthly_payment: Decimal
    total_interest: Decimal
    total_amount: Decimal
    approximate_apr: Decimal

    @property
    def is_finite(self) -> bool:
        return all(
            value.is_finite()
            for value in (self.monthly_payment, self.total_interest, self.total_amount)
        )


# =============================================================================
# HELPERS
# =============================================================================


def _to_decimal(value: Any, name: str) -> Decimal:
    """Convert a numeric input to Decimal without float binary noise."""
    if isinstance(value, bool):
        raise InvalidArgument(f"{name} must be a number, got {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidArgument(f"{name} must be a number, got {value!r}") from None
    if not result.is_finite():
        raise InvalidArgument(f"{name} must be finite, got {value!r}")
    return result


def round_money(value: Decimal) -> Decimal:
    """Round to cents, half away from zero. NaN passes through unchanged."""
    if not value.is_finite():
        return value
    # + 0 folds -0.00 into 0.00
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP) + 0


def _validate_term(term_months: Any) -> int:
    if isinstance(term_months, bool) or not isinstance(term_months, int):
        raise InvalidArgument(f"term_months must be an integer, got {term_months!r}")
    if term_months <= 0:
        raise InvalidArgument(f"term_months must be positive, got {term_months}")
    return term_months


# =============================================================================
# CALCULATIONS
# =============================================================================


def calculate_monthly_payment(
    principal: Any,
    annual_rate_percent: Any,
    term_months: int,
    zero_rate_policy: ZeroRatePolicy = ZeroRatePolicy.FLAT,
) -> LoanQuote:
    """Price a fixed-rate, fixed-term amortizing loan.

    Args:
        principal: Amount financed, must be > 0
        annual_rate_percent: Nominal yearly rate in percent, 0 <= rate < 100
        term_months: Number of monthly installments, must be > 0
        zero_rate_policy: Behaviour when the rate is exactly zero

    Returns:
        LoanQuote with payment, totals and approximate APR rounded to cents

    Raises:
        InvalidArgument: for non-positive principal or term, or a rate
            outside [0, 100)

    Examples:
        >>> calculate_monthly_payment(20000, 6, 60).monthly_payment
        Decimal('386.66')
    """
    amount = _to_decimal(principal, "principal")
    rate = _to_decimal(annual_rate_percent, "annual_rate_percent")
    months = _validate_term(term_months)

    if amount <= 0:
        raise InvalidArgument(f"principal must be positive, got {amount}")
    if rate < 0 or rate >= MAX_ANNUAL_RATE_PERCENT:
        raise InvalidArgument(
            f"annual_rate_percent must be in [0, {MAX_ANNUAL_RATE_PERCENT}), got {rate}"
        )

    approximate_apr = round_money(rate + ESTIMATED_FEE_MARKUP_PERCENT)

    if rate == 0:
        if ZeroRatePolicy(zero_rate_policy) is ZeroRatePolicy.NON_FINITE:
            return LoanQuote(
                principal=amount,
                annual_rate_percent=rate,
                term_months=months,
                monthly_payment=_NAN,
                total_interest=_NAN,
                total_amount=_NAN,
                approximate_apr=approximate_apr,
            )
        monthly_payment = round_money(amount / months)
    else:
        monthly_rate = rate / 100 / MONTHS_PER_YEAR
        growth = (1 + monthly_rate) ** months
        monthly_payment = round_money(amount * (monthly_rate * growth) / (growth - 1))

    total_amount = round_money(monthly_payment * months)
    total_interest = round_money(total_amount - amount)

    return LoanQuote(
        principal=amount,
        annual_rate_percent=rate,
        term_months=months,
        monthly_payment=monthly_payment,
        total_interest=total_interest,
        total_amount=total_amount,
        approximate_apr=approximate_apr,
    )


def quote_vehicle_financing(
    price: Any,
    down_payment: Any,
    term_months: int,
    annual_rate_percent: Any,
    zero_rate_policy: ZeroRatePolicy = ZeroRatePolicy.FLAT,
) -> LoanQuote:
    """Quote a car loan from the calculator widget's inputs.

    The financed principal is the vehicle price minus the down payment.
    """
    vehicle_price = _to_decimal(price, "price")
    advance = _to_decimal(down_payment, "down_payment")

    if advance < 0:
        raise InvalidArgument(f"down_payment cannot be negative, got {advance}")
    if vehicle_price <= advance:
        raise InvalidArgument("down_payment must be lower than the vehicle price")

    return calculate_monthly_payment(
        vehicle_price - advance,
        annual_rate_percent,
        term_months,
        zero_rate_policy=zero_rate_policy,
    )
