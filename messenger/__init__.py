"""Message catalog with color markup, prefixes and a properties file store."""

from __future__ import annotations

from messenger.messages import DEFAULT_SCHEMA, PREFIX_KEY, MessageCatalog, MessageEntry, Msg
from messenger.sender import ConsoleSender, LoggingSender, MessageSender, configure_sender

__all__ = [
    'DEFAULT_SCHEMA',
    'PREFIX_KEY',
    'ConsoleSender',
    'LoggingSender',
    'MessageCatalog',
    'MessageEntry',
    'MessageSender',
    'Msg',
    'configure_sender',
]
