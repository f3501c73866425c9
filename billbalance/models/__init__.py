"""
Data Models Package

This package contains the Pydantic models used by Bill Balance.
Everything read from the payments file must conform to these schemas.
"""

from billbalance.models.payment import (
    MAX_DAY,
    MIN_DAY,
    Payment,
    PaymentBook,
    Projection,
)

__all__ = [
    "MAX_DAY",
    "MIN_DAY",
    "Payment",
    "PaymentBook",
    "Projection",
]
