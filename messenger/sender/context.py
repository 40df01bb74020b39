"""Holds the process-wide delivery sink for hosts that want one."""

from __future__ import annotations

from messenger.errors import SenderNotConfiguredError
from messenger.sender.message_sender import MessageSender

_sender: MessageSender | None = None


def configure_sender(sender: MessageSender | None) -> None:
    """Register the sink used by catalogs built without their own sender."""
    global _sender
    _sender = sender


def get_sender() -> MessageSender:
    """Return the registered sink.

    :raises SenderNotConfiguredError: if no sink has been registered.
    """
    if _sender is None:
        raise SenderNotConfiguredError('MessageSender is not configured')
    return _sender
