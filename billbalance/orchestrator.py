"""
Main Orchestrator for Bill Balance

This module ties the components together and defines the flows behind
each CLI command:
1. Compute (load → project → remaining balance)
2. Adjust  (load → find by name → update → save)
3. List    (load → sort → format)
4. Edit    (hand the payments file to an editor)

DESIGN DECISION: The orchestrator is the only place that touches both
storage and the pure components. The projector never sees storage,
and storage never sees the projector.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional

from billbalance.config import Settings
from billbalance.ledger import adjust_payment, find_payment, format_payment_list
from billbalance.models.payment import Payment, PaymentBook, Projection
from billbalance.observability import get_logger
from billbalance.projection import PaymentManager
from billbalance.services.editor import edit_file
from billbalance.services.storage import PaymentStorageInterface, YamlPaymentStorage


logger = get_logger(__name__)


def utc_today() -> date:
    """Today's date in UTC."""
    return datetime.now(timezone.utc).date()


class BalanceFlow:
    """
    Orchestrates every command against one payments store.

    Storage errors and lookup errors propagate unchanged to the caller.
    """

    def __init__(
        self,
        storage: PaymentStorageInterface,
        currency_symbol: str = "£",
        editor: Optional[str] = None,
    ):
        self._storage = storage
        self.currency_symbol = currency_symbol
        self._editor = editor

    @property
    def storage(self) -> PaymentStorageInterface:
        return self._storage

    def compute(
        self,
        balance: Decimal,
        reset_day: int,
        today: Optional[date] = None,
    ) -> Projection:
        """Project `balance` forward to the next reset."""
        book = self._storage.load()
        manager = PaymentManager.from_payments(balance, reset_day, book.payments)
        return manager.project(today or utc_today())

    def adjust(
        self,
        name: str,
        amount: Optional[Decimal] = None,
        day_paid: Optional[int] = None,
    ) -> Payment:
        """
        Update one bill by name and save the whole list.

        Raises:
            PaymentNotFoundError: If no bill has that name
        """
        book = self._storage.load()
        payments = adjust_payment(book.payments, name, amount=amount, day_paid=day_paid)
        self._storage.save(PaymentBook(payments=payments))
        return find_payment(payments, name)

    def list_payments(self, show_amount: bool = False, show_day_paid: bool = False) -> list[str]:
        """Sorted, formatted bill lines."""
        book = self._storage.load()
        return format_payment_list(
            book.payments,
            show_amount=show_amount,
            show_day_paid=show_day_paid,
            currency_symbol=self.currency_symbol,
        )

    def edit(self) -> None:
        """Open the payments file in an editor."""
        # Make sure the file exists before the editor opens it.
        self._storage.load()
        edit_file(self._storage.path, editor=self._editor)


def create_app_components(settings: Settings) -> BalanceFlow:
    """
    Factory function to create the application flow from settings.

    Args:
        settings: Loaded application settings

    Returns:
        BalanceFlow backed by the YAML payments file
    """
    storage = YamlPaymentStorage(settings.config_dir, settings.file_name)
    logger.debug("components_created", path=str(storage.path))

    return BalanceFlow(
        storage=storage,
        currency_symbol=settings.currency_symbol,
        editor=settings.editor,
    )
