"""Checks the compiled-in schema and its validation."""

from __future__ import annotations

import pytest

from messenger.errors import SchemaError
from messenger.messages import DEFAULT_SCHEMA, PREFIX_KEY, MessageCatalog, MessageEntry, Msg
from messenger.messages.schema import validate_schema


def test_default_schema_covers_every_key_in_order() -> None:
    assert [item.key for item in DEFAULT_SCHEMA] == [member.value for member in Msg]


def test_prefix_entry_is_not_prefixed() -> None:
    prefix = next(item for item in DEFAULT_SCHEMA if item.key == PREFIX_KEY)
    assert prefix.uses_prefix is False


def test_entries_are_immutable() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_SCHEMA[0].default_value = 'changed'  # type: ignore[misc]


def test_duplicate_keys_are_rejected() -> None:
    entries = [MessageEntry('GREETING', 'Hi'), MessageEntry('GREETING', 'Hello')]
    with pytest.raises(SchemaError):
        MessageCatalog(entries)


def test_keys_colliding_after_derivation_are_rejected() -> None:
    """``LEVEL_1`` and ``LEVEL1`` share the file key ``level1``."""
    with pytest.raises(SchemaError):
        validate_schema([MessageEntry('LEVEL_1', 'x'), MessageEntry('LEVEL1', 'y')])


@pytest.mark.parametrize('key', ['lower_case', '_LEADING', 'TRAILING_', 'WITH SPACE', ''])
def test_malformed_keys_are_rejected(key: str) -> None:
    with pytest.raises(SchemaError):
        validate_schema([MessageEntry(key, 'x')])
