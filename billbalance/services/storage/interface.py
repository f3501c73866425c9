"""
Abstract Storage Interface

DESIGN DECISION: Storage sits behind a small abstract interface so that:
1. The YAML file can be swapped for another format later
2. Tests and callers can use in-memory storage
3. The CLI never needs to know where the file lives

The whole payment list is read and written as one document. There
are no partial updates.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from billbalance.models.payment import PaymentBook


class PaymentStorageInterface(ABC):
    """
    Abstract interface for payment list storage.

    Any storage implementation must implement these methods.
    """

    @property
    @abstractmethod
    def path(self) -> Path:
        """Location of the underlying document, for the editor."""
        pass

    @abstractmethod
    def load(self) -> PaymentBook:
        """
        Load the full payment list.

        Returns:
            The stored PaymentBook (empty on first run)

        Raises:
            StorageParseError: If the document is malformed
            StorageError: If the document cannot be read
        """
        pass

    @abstractmethod
    def save(self, book: PaymentBook) -> None:
        """
        Replace the stored payment list.

        Raises:
            StorageError: If the document cannot be written
        """
        pass


class InMemoryPaymentStorage(PaymentStorageInterface):
    """Storage kept in a Python object. Used by tests."""

    def __init__(
        self,
        book: Optional[PaymentBook] = None,
        path: Path = Path("memory.yaml"),
    ):
        self._book = book if book is not None else PaymentBook()
        self._path = path
        self.save_count = 0

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> PaymentBook:
        return self._book.model_copy(deep=True)

    def save(self, book: PaymentBook) -> None:
        self._book = book.model_copy(deep=True)
        self.save_count += 1


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageParseError(StorageError):
    """Stored document exists but is not a valid payment list."""
    pass
