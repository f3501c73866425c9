"""
Storage Services Package

Provides the abstract storage interface and its implementations.
The YAML file is the real backend; the in-memory one backs tests.
"""

from billbalance.services.storage.interface import (
    InMemoryPaymentStorage,
    PaymentStorageInterface,
    StorageError,
    StorageParseError,
)
from billbalance.services.storage.yaml_file import YamlPaymentStorage

__all__ = [
    # Interfaces
    "PaymentStorageInterface",
    # Exceptions
    "StorageError",
    "StorageParseError",
    # Implementations
    "InMemoryPaymentStorage",
    "YamlPaymentStorage",
]
