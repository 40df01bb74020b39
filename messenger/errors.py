"""Exceptions raised by the message catalog and its delivery layer."""

from __future__ import annotations


class MessengerError(RuntimeError):
    """Base class for catalog failures."""


class FileAccessError(MessengerError):
    """Messages file cannot be created or opened for reading."""


class PersistenceWriteError(MessengerError):
    """Reconciled catalog could not be written back to disk."""


class SchemaError(MessengerError):
    """Schema definition is malformed (duplicate or invalid key)."""


class SenderNotConfiguredError(MessengerError):
    """No delivery sink has been configured."""


class UnknownMessageError(MessengerError, KeyError):
    """Requested key is not part of the catalog schema."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key: str = key

    def __str__(self) -> str:
        return f'Unknown message key: {self.key}'
