from __future__ import annotations

from enum import Enum


class Msg(str, Enum):
    """Identifiers of the compiled-in message entries.

    Names are upper case words separated by underscores. The key written to
    the messages file is derived from the name with :func:`persisted_key`.
    """

    PREFIX = 'PREFIX'
    EXAMPLE_SIMPLE = 'EXAMPLE_SIMPLE'
    EXAMPLE_FORMATTED = 'EXAMPLE_FORMATTED'
    EXAMPLE_COLOR = 'EXAMPLE_COLOR'
    EXAMPLE_NO_PREFIX = 'EXAMPLE_NO_PREFIX'


# Entry whose rendered value is prepended to other messages
PREFIX_KEY: str = Msg.PREFIX.value


def key_name(key: Msg | str) -> str:
    """Return plain identifier for an enum member or a raw string."""
    return key.value if isinstance(key, Msg) else str(key)


def persisted_key(name: Msg | str) -> str:
    """Derive the messages file key from an entry identifier.

    ``EXAMPLE_NO_PREFIX`` becomes ``exampleNoPrefix`` and ``PREFIX`` becomes
    ``prefix``.

    :param name: Entry identifier (``Msg`` member or upper-snake string).
    :returns: Lower camel case key.
    """
    words: list[str] = [word for word in key_name(name).lower().split('_') if word]
    if not words:
        return ''
    head, *tail = words
    return head + ''.join(word[0].upper() + word[1:] for word in tail)
