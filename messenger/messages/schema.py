"""Compiled-in message entries and their default values."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from messenger.errors import SchemaError

from .keys import Msg, persisted_key

_KEY_RE = re.compile(r'^[A-Z][A-Z0-9]*(?:_[A-Z0-9]+)*$')


@dataclass(frozen=True)
class MessageEntry:
    """Describe one message template of the catalog.

    :param key: Upper-snake identifier, unique within the schema.
    :param default_value: Template with ``&`` color markup, written to the file when missing.
    :param uses_prefix: Whether the shared prefix is prepended by default.
    """

    key: str
    default_value: str
    uses_prefix: bool = True

    @property
    def persisted_key(self) -> str:
        return persisted_key(self.key)


def entry(key: Msg, default_value: str, uses_prefix: bool = True) -> MessageEntry:
    return MessageEntry(key=key.value, default_value=default_value, uses_prefix=uses_prefix)


# Modify the values below for your plugin; the prefix itself is never prefixed
DEFAULT_SCHEMA: tuple[MessageEntry, ...] = (
    entry(Msg.PREFIX, '&7[&6MyPlugin&7] &f', uses_prefix=False),
    entry(Msg.EXAMPLE_SIMPLE, 'This is the default value'),
    entry(Msg.EXAMPLE_FORMATTED, 'This is a string with some data in it: %s'),
    entry(Msg.EXAMPLE_COLOR, 'This is a string with some &ccolor in it'),
    entry(Msg.EXAMPLE_NO_PREFIX, 'This is a string which will not have a prefix attached to it', uses_prefix=False),
)


def validate_schema(entries: Iterable[MessageEntry]) -> tuple[MessageEntry, ...]:
    """Check that keys are well-formed and unique.

    :param entries: Schema entries in declaration order.
    :raises SchemaError: on an invalid or duplicate key (or persisted key).
    :returns: Entries as an immutable tuple.
    """
    result: tuple[MessageEntry, ...] = tuple(entries)
    seen: set[str] = set()
    seen_persisted: set[str] = set()
    for item in result:
        if not _KEY_RE.match(item.key):
            raise SchemaError(f'Invalid message key: {item.key!r}')
        if item.key in seen:
            raise SchemaError(f'Duplicate message key: {item.key}')
        if item.persisted_key in seen_persisted:
            raise SchemaError(f'Duplicate persisted key: {item.persisted_key}')
        seen.add(item.key)
        seen_persisted.add(item.persisted_key)
    return result
