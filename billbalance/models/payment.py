"""
Core Data Models for Bill Balance

These models define the schemas for everything read from or written to
the payments file, and for the result of a balance projection.

DESIGN DECISION: Payment equality is plain structural pydantic equality.
Lookup and ordering by name go through payment_sort_key / find_payment
in the ledger package instead of overloaded operators, so two payments
with the same name but different amounts never compare equal by accident.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# Days 29-31 do not exist in every month, so bills are kept to 1-28.
MIN_DAY = 1
MAX_DAY = 28


class Payment(BaseModel):
    """
    A recurring monthly bill.

    Immutable: adjustments produce a new Payment.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="forbid")

    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Unique bill name"
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        description="Amount taken each month"
    )
    day_paid: int = Field(
        ...,
        ge=MIN_DAY,
        le=MAX_DAY,
        description="Day of month the bill leaves the account"
    )

    @field_validator('amount')
    @classmethod
    def normalize_amount(cls, v: Decimal) -> Decimal:
        """Keep amounts in plain notation (1E+3 becomes 1000)."""
        return Decimal(f"{v:f}")

    def describe(self, currency_symbol: str = "£") -> str:
        """Multi-line card used after an adjustment."""
        return (
            f"Bill: {self.name}\n"
            f"Amount: {currency_symbol}{self.amount}\n"
            f"Day paid: {self.day_paid}"
        )


class PaymentBook(BaseModel):
    """
    The persisted document: every bill the user tracks.

    This is what gets written to the YAML file.
    """
    model_config = ConfigDict(extra="forbid")

    payments: list[Payment] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_unique_names(self) -> 'PaymentBook':
        """Names identify bills, so each may appear only once."""
        seen = set()
        duplicates = []
        for payment in self.payments:
            if payment.name in seen and payment.name not in duplicates:
                duplicates.append(payment.name)
            seen.add(payment.name)

        if duplicates:
            raise ValueError(f"Duplicate payment names: {', '.join(duplicates)}")
        return self


class Projection(BaseModel):
    """
    Result of projecting a balance forward to the next reset.

    remaining = balance - pending_total
    """
    model_config = ConfigDict(frozen=True)

    today: date
    balance: Decimal
    reset_day: int
    pending: tuple[Payment, ...] = ()
    pending_total: Decimal = Decimal("0")
    remaining: Decimal
