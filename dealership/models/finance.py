from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from ..services.loan_calculator import LoanQuote


class FinanceQuoteRequest(BaseModel):
    """Inputs of the finance calculator widget."""

    price: Decimal = Field(..., gt=1000, le=500_000)
    down_payment: Decimal = Field(default=Decimal("0"), ge=0)
    term_months: int = Field(default=60, ge=12, le=84)
    annual_rate_percent: Decimal = Field(default=Decimal("8.5"), ge=0, lt=100)

    @model_validator(mode="after")
    def down_payment_below_price(self) -> "FinanceQuoteRequest":
        if self.down_payment >= self.price:
            raise ValueError("down_payment must be lower than price")
        return self


class LoanQuoteResponse(BaseModel):
    principal: Decimal
    annual_rate_percent: Decimal
    term_months: int
    monthly_payment: Decimal | None
    total_interest: Decimal | None
    total_amount: Decimal | None
    approximate_apr: Decimal

    @classmethod
    def from_quote(cls, quote: LoanQuote) -> "LoanQuoteResponse":
        """NaN amounts (legacy zero-rate policy) are reported as null."""

        def _finite(value: Decimal) -> Decimal | None:
            return value if value.is_finite() else None

        return cls(
            principal=quote.principal,
            annual_rate_percent=quote.annual_rate_percent,
            term_months=quote.term_months,
            monthly_payment=_finite(quote.monthly_payment),
            total_interest=_finite(quote.total_interest),
            total_amount=_finite(quote.total_amount),
            approximate_apr=quote.approximate_apr,
        )
