"""
YAML File Storage Implementation

The payment list lives in a single human-editable YAML file, by default
~/.config/balance/spend.yaml:

    payments:
    - name: Phone
      amount: '10.00'
      day_paid: 28

Amounts are written as strings so Decimal values survive the round trip
unchanged. A missing file is treated as a first run: an empty document is
written and returned.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from billbalance.models.payment import PaymentBook
from billbalance.observability import get_logger
from billbalance.services.storage.interface import (
    PaymentStorageInterface,
    StorageError,
    StorageParseError,
)


logger = get_logger(__name__)


class YamlPaymentStorage(PaymentStorageInterface):
    """
    Payment storage backed by one YAML file.

    The directory and file name are passed in; nothing here reads settings.
    """

    EXTENSION = ".yaml"

    def __init__(self, config_dir: Path, file_name: str = "spend"):
        self._path = Path(config_dir) / f"{file_name}{self.EXTENSION}"

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> PaymentBook:
        if not self._path.exists():
            book = PaymentBook()
            self.save(book)
            logger.info("storage_created", path=str(self._path))
            return book

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise StorageParseError(f"Could not parse {self._path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Could not read {self._path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise StorageParseError(
                f"Could not parse {self._path}: expected a mapping at the top level"
            )

        try:
            book = PaymentBook.model_validate(data)
        except ValidationError as e:
            raise StorageParseError(f"Invalid payments in {self._path}: {e}") from e

        logger.debug("payments_loaded", path=str(self._path), count=len(book.payments))
        return book

    def save(self, book: PaymentBook) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as f:
                yaml.safe_dump(
                    book.model_dump(mode="json"),
                    f,
                    sort_keys=False,
                    allow_unicode=True,
                    default_flow_style=False,
                )
        except OSError as e:
            raise StorageError(f"Could not write {self._path}: {e}") from e

        logger.debug("payments_saved", path=str(self._path), count=len(book.payments))
