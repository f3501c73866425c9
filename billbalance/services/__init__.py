"""Services package."""

from billbalance.services.editor import (
    EditorError,
    edit_file,
    resolve_editor,
)
from billbalance.services.storage import (
    InMemoryPaymentStorage,
    PaymentStorageInterface,
    StorageError,
    StorageParseError,
    YamlPaymentStorage,
)

__all__ = [
    # Editor
    "EditorError",
    "edit_file",
    "resolve_editor",
    # Storage services
    "InMemoryPaymentStorage",
    "PaymentStorageInterface",
    "StorageError",
    "StorageParseError",
    "YamlPaymentStorage",
]
