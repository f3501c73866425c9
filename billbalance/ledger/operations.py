"""
Ledger Operations

Lookup, adjustment, ordering and formatting of the payment list.

DESIGN DECISION: Identity by name lives here as explicit functions
(payment_sort_key, find_payment) rather than as __eq__ / __lt__ on
Payment. Payment itself keeps ordinary value equality.

None of these mutate their input; adjust_payment returns a new list.
"""

from decimal import Decimal
from typing import Iterable, Optional, Sequence

from billbalance.models.payment import Payment
from billbalance.observability import get_logger


logger = get_logger(__name__)


class PaymentNotFoundError(LookupError):
    """No payment with the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} not found")


def payment_sort_key(payment: Payment) -> str:
    """Key for ordering payments alphabetically by name."""
    return payment.name


def sort_payments(payments: Iterable[Payment]) -> list[Payment]:
    """Stable alphabetical sort by name."""
    return sorted(payments, key=payment_sort_key)


def find_payment(payments: Iterable[Payment], name: str) -> Payment:
    """
    Return the first payment called `name`.

    Raises:
        PaymentNotFoundError: If nothing matches
    """
    name = name.strip()
    for payment in payments:
        if payment.name == name:
            return payment
    raise PaymentNotFoundError(name)


def adjust_payment(
    payments: Sequence[Payment],
    name: str,
    amount: Optional[Decimal] = None,
    day_paid: Optional[int] = None,
) -> list[Payment]:
    """
    Replace amount and/or day_paid on the payment called `name`.

    Only the fields that are supplied change. The updated payment goes
    back through model validation, so out-of-range values are rejected
    here too.

    Returns:
        A new list with the adjusted payment in the same position

    Raises:
        PaymentNotFoundError: If no payment has that name
    """
    name = name.strip()
    updates = {}
    if amount is not None:
        updates["amount"] = amount
    if day_paid is not None:
        updates["day_paid"] = day_paid

    adjusted = list(payments)
    for index, payment in enumerate(adjusted):
        if payment.name != name:
            continue

        adjusted[index] = Payment.model_validate({**payment.model_dump(), **updates})
        logger.info(
            "payment_adjusted",
            name=name,
            fields=sorted(updates),
        )
        return adjusted

    raise PaymentNotFoundError(name)


def format_payment_line(
    payment: Payment,
    show_amount: bool = False,
    show_day_paid: bool = False,
    currency_symbol: str = "£",
) -> str:
    """One line of `list` output."""
    if show_amount and show_day_paid:
        return f"{payment.name} {currency_symbol}{payment.amount}, day paid: {payment.day_paid}"
    if show_amount:
        return f"{payment.name} {currency_symbol}{payment.amount}"
    if show_day_paid:
        return f"{payment.name}, day_paid: {payment.day_paid}"
    return payment.name


def format_payment_list(
    payments: Iterable[Payment],
    show_amount: bool = False,
    show_day_paid: bool = False,
    currency_symbol: str = "£",
) -> list[str]:
    """Sorted `list` output, one string per payment."""
    return [
        format_payment_line(p, show_amount, show_day_paid, currency_symbol)
        for p in sort_payments(payments)
    ]
