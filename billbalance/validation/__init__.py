"""Input validation package."""

from billbalance.validation.validator import (
    DAY_RANGE,
    ValidationError,
    parse_amount,
    parse_balance,
    parse_day,
)

__all__ = [
    "DAY_RANGE",
    "ValidationError",
    "parse_amount",
    "parse_balance",
    "parse_day",
]
