"""
Balance Projection

Works out how much of the current balance is still spendable before the
next pay-cycle reset, given the bills that have not gone out yet.

Both today and each bill's day are rebased onto a single cycle that starts
at the reset day and is as long as the current month:

    rebased = (day - reset_day) mod days_in_month(today)

A bill is still pending when its rebased day is strictly after today's.
A bill due today is treated as already paid, and a bill due on the reset
day itself (rebased 0) is never pending.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from billbalance.models.payment import Payment, Projection
from billbalance.observability import get_logger
from billbalance.projection.calendar import days_in_month, modulo


logger = get_logger(__name__)


@dataclass(frozen=True)
class PaymentManager:
    """
    Projection context for a single computation.

    Build one per calculation and discard it; it holds no other state.
    """
    balance: Decimal
    reset_day: int
    payments: tuple[Payment, ...]

    @classmethod
    def from_payments(
        cls,
        balance: Decimal,
        reset_day: int,
        payments: Iterable[Payment],
    ) -> "PaymentManager":
        return cls(balance=balance, reset_day=reset_day, payments=tuple(payments))

    def _rebase(self, day: int, cycle_length: int) -> int:
        return modulo(day - self.reset_day, cycle_length)

    def pending_payments(self, today: date) -> list[Payment]:
        """Payments that still have to leave the account before the next reset."""
        cycle_length = days_in_month(today)
        rebased_today = self._rebase(today.day, cycle_length)

        return [
            payment
            for payment in self.payments
            if self._rebase(payment.day_paid, cycle_length) > rebased_today
        ]

    def project(self, today: date) -> Projection:
        """Full projection: pending bills, their total and what is left."""
        pending = self.pending_payments(today)
        pending_total = sum((p.amount for p in pending), Decimal("0"))
        remaining = self.balance - pending_total

        logger.debug(
            "balance_projected",
            today=today.isoformat(),
            reset_day=self.reset_day,
            pending_count=len(pending),
            pending_total=str(pending_total),
            remaining=str(remaining),
        )

        return Projection(
            today=today,
            balance=self.balance,
            reset_day=self.reset_day,
            pending=tuple(pending),
            pending_total=pending_total,
            remaining=remaining,
        )

    def remaining_balance(self, today: date) -> Decimal:
        """Balance minus every bill still pending this cycle."""
        return self.project(today).remaining
