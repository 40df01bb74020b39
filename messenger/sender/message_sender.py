"""Contract and stock implementations of the message delivery sink."""

from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO, runtime_checkable

from messenger.messages.colors import strip_colors, to_ansi

logger: logging.Logger = logging.getLogger(__name__)


@runtime_checkable
class MessageSender(Protocol):
    """Deliver a rendered message to a recipient of the host runtime."""

    def send_message(self, recipient: object, text: str) -> None: ...


class ConsoleSender:
    """Write messages to a text stream, one ``[recipient] text`` line each."""

    def __init__(self, stream: TextIO | None = None, *, ansi: bool = True) -> None:
        self._stream: TextIO | None = stream
        self._ansi: bool = ansi

    def send_message(self, recipient: object, text: str) -> None:
        stream: TextIO = self._stream if self._stream is not None else sys.stdout
        body: str = to_ansi(text) if self._ansi else strip_colors(text)
        stream.write(f'[{recipient}] {body}\n')
        stream.flush()


class LoggingSender:
    """Deliver messages as log records (color escapes removed)."""

    def __init__(self, target: logging.Logger | None = None, *, level: int = logging.INFO) -> None:
        self._logger: logging.Logger = target if target is not None else logger
        self._level: int = level

    def send_message(self, recipient: object, text: str) -> None:
        self._logger.log(self._level, '-> %s: %s', recipient, strip_colors(text))
