"""Delivery sinks for rendered messages."""

from __future__ import annotations

from .context import configure_sender, get_sender
from .message_sender import ConsoleSender, LoggingSender, MessageSender

__all__ = [
    'ConsoleSender',
    'LoggingSender',
    'MessageSender',
    'configure_sender',
    'get_sender',
]
