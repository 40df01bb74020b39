"""Public API of messages package: keys, schema, catalog and file codec."""

from __future__ import annotations

from .catalog import MessageCatalog
from .colors import strip_colors, to_ansi, translate_alternate_color_codes
from .keys import PREFIX_KEY, Msg, persisted_key
from .schema import DEFAULT_SCHEMA, MessageEntry

__all__: list[str] = [
    'DEFAULT_SCHEMA',
    'PREFIX_KEY',
    'MessageCatalog',
    'MessageEntry',
    'Msg',
    'persisted_key',
    'strip_colors',
    'to_ansi',
    'translate_alternate_color_codes',
]
