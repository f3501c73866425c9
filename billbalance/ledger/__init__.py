"""Payment list operations package."""

from billbalance.ledger.operations import (
    PaymentNotFoundError,
    adjust_payment,
    find_payment,
    format_payment_line,
    format_payment_list,
    payment_sort_key,
    sort_payments,
)

__all__ = [
    "PaymentNotFoundError",
    "adjust_payment",
    "find_payment",
    "format_payment_line",
    "format_payment_list",
    "payment_sort_key",
    "sort_payments",
]
