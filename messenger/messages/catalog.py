"""Keeps the current message templates and renders them for delivery."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from messenger.errors import FileAccessError, PersistenceWriteError, UnknownMessageError
from messenger.sender import context as sender_context

from .colors import translate_alternate_color_codes
from .keys import PREFIX_KEY, Msg, key_name
from .properties import read_properties, write_properties
from .schema import DEFAULT_SCHEMA, MessageEntry, validate_schema

if TYPE_CHECKING:
    from messenger.sender.message_sender import MessageSender

logger: logging.Logger = logging.getLogger(__name__)


class MessageCatalog:
    """Table of message templates backed by an editable properties file.

    Every schema entry starts with its translated default value. ``load``
    replaces values with the ones stored in the messages file and writes
    missing defaults back. Rendering optionally prepends the ``PREFIX``
    entry.

    :param schema: Ordered, closed set of entries.
    :param sender: Delivery sink for ``send``; the registered one is used when ``None``.
    :param alt_color_char: Markup character translated into color escapes.
    """

    def __init__(
        self,
        schema: Iterable[MessageEntry] = DEFAULT_SCHEMA,
        *,
        sender: MessageSender | None = None,
        alt_color_char: str = '&',
    ) -> None:
        self._entries: tuple[MessageEntry, ...] = validate_schema(schema)
        self._index: dict[str, int] = {item.key: position for position, item in enumerate(self._entries)}
        self._sender: MessageSender | None = sender
        self._alt_color_char: str = alt_color_char
        self._current_values: list[str] = []
        self._uses_prefix: list[bool] = []
        # One-way flag: stays False once the prefix entry was not found
        self._has_prefix: bool = True
        self.reset()

    def reset(self) -> None:
        """Restore compiled-in defaults and prefix flags."""
        self._current_values = [self._translate(item.default_value) for item in self._entries]
        self._uses_prefix = [item.uses_prefix for item in self._entries]

    @property
    def entries(self) -> tuple[MessageEntry, ...]:
        return self._entries

    @property
    def has_prefix(self) -> bool:
        """Whether the prefix entry is still considered available."""
        return self._has_prefix

    def keys(self) -> list[str]:
        return [item.key for item in self._entries]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (Msg, str)):
            return False
        return key_name(key) in self._index

    def __iter__(self) -> Iterator[MessageEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def default_value(self, key: Msg | str) -> str:
        """Return raw default written to the file when the value is missing."""
        return self._entries[self._position(key)].default_value

    def current_value(self, key: Msg | str) -> str:
        """Return translated template without formatting or prefix."""
        return self._current_values[self._position(key)]

    def is_prefix_enabled(self, key: Msg | str) -> bool:
        return self._uses_prefix[self._position(key)]

    def set_prefix_enabled(self, key: Msg | str, enabled: bool) -> None:
        """Choose whether the prefix is attached to the message."""
        self._uses_prefix[self._position(key)] = enabled

    def render(self, key: Msg | str, *args: object) -> str:
        """Format the current value and prepend the prefix when enabled.

        :param key: Entry identifier.
        :param args: Positional values for ``%s``/``%d`` placeholders.
        :raises UnknownMessageError: if ``key`` is not in the schema.
        :raises TypeError: if ``args`` do not match the placeholders.
        :returns: Text ready for delivery.
        """
        name: str = key_name(key)
        position: int = self._position(name)
        message: str = self._current_values[position] % args

        # The prefix entry is never prefixed with itself
        if self._uses_prefix[position] and self._has_prefix and name != PREFIX_KEY:
            if PREFIX_KEY in self._index:
                message = self.render(PREFIX_KEY) + message
            else:
                logger.warning('Prefix entry %s is missing, messages are sent without prefix', PREFIX_KEY)
                self._has_prefix = False
        return message

    def send(self, recipient: object, key: Msg | str, *args: object) -> None:
        """Render a message and hand it to the delivery sink.

        :raises SenderNotConfiguredError: if neither an own nor a registered sink exists.
        """
        sender: MessageSender = self._sender if self._sender is not None else sender_context.get_sender()
        sender.send_message(recipient, self.render(key, *args))

    def load(self, path: Path | str, header: str | None = None) -> None:
        """Load values from the messages file and save missing defaults.

        Never raises on I/O problems: a file that cannot be created or read
        leaves the catalog untouched, a failed write keeps the values that
        were already loaded.

        :param path: Messages file, created when absent.
        :param header: Comment written at the top of the file, ``None`` for none.
        """
        target: Path = Path(path)
        try:
            _ensure_file(target)
            stored: dict[str, str] = read_properties(target)
        except FileAccessError:
            logger.exception('Failed to load messages from %s', target)
            return

        loaded: int = 0
        for position, item in enumerate(self._entries):
            file_key: str = item.persisted_key
            if file_key in stored:
                self._current_values[position] = self._translate(stored[file_key])
                loaded += 1
            else:
                stored[file_key] = item.default_value
                logger.debug('Default value added for %s', file_key)
        logger.info('Loaded %s of %s messages from %s', loaded, len(self._entries), target)

        try:
            write_properties(target, stored, header)
        except PersistenceWriteError:
            logger.exception('Failed to save messages to %s', target)

    def _translate(self, text: str) -> str:
        return translate_alternate_color_codes(text, self._alt_color_char)

    def _position(self, key: Msg | str) -> int:
        name: str = key_name(key)
        try:
            return self._index[name]
        except KeyError:
            raise UnknownMessageError(name) from None


def _ensure_file(path: Path) -> None:
    """Create an empty messages file (and its directory) if missing."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)
    except OSError as exc:
        raise FileAccessError(f'Cannot create messages file {path}: {exc}') from exc
