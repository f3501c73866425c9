"""
Input Validation

Everything typed on the command line passes through here before it
reaches the ledger or the projector.

POLICY:
- Amounts must be >= 0. A zero amount is allowed (a bill paused for a
  month, or a free trial still worth tracking).
- Days (day paid, reset day) must fall in 1-28 so that every month has them.
- A starting balance may be negative (an overdrawn account).

IMPORTANT: Validation NEVER silently fixes issues. Anything out of range
is reported back to the user with the offending value.
"""

from decimal import Decimal, InvalidOperation

from billbalance.models.payment import MAX_DAY, MIN_DAY


DAY_RANGE = range(MIN_DAY, MAX_DAY + 1)


class ValidationError(ValueError):
    """User input failed validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


def _parse_decimal(text: str, field: str) -> Decimal:
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        raise ValidationError(field, f"`{text}` isn't a Decimal") from None

    if not value.is_finite():
        raise ValidationError(field, f"`{text}` isn't a finite amount")
    # Exponent input such as 1e3 is kept in plain notation.
    return Decimal(f"{value:f}")


def parse_amount(text: str) -> Decimal:
    """Parse a bill amount; must be greater than or equal to zero."""
    amount = _parse_decimal(text, "amount")
    if amount < 0:
        raise ValidationError("amount", "amount not greater than or equal to zero")
    return amount


def parse_balance(text: str) -> Decimal:
    """Parse an account balance; any finite decimal."""
    return _parse_decimal(text, "balance")


def parse_day(text: str, field: str = "day_paid") -> int:
    """Parse a day of month in 1-28."""
    try:
        day = int(text.strip())
    except ValueError:
        raise ValidationError(field, f"`{text}` isn't an integer") from None

    if day not in DAY_RANGE:
        raise ValidationError(
            field,
            f"{field.replace('_', ' ')} not in range {DAY_RANGE.start}-{DAY_RANGE.stop - 1}",
        )
    return day
