"""Translates ``&`` color markup into in-band color escapes."""

from __future__ import annotations

import re

# In-band escape character understood by the game client
COLOR_CHAR: str = '§'

# Codes recognised after the markup character: colors 0-f, formats k-o, reset r
COLOR_CODES: str = '0123456789AaBbCcDdEeFfKkLlMmNnOoRr'

_STRIP_RE = re.compile(f'{COLOR_CHAR}[0-9a-fk-or]', re.IGNORECASE)

ANSI_RESET: str = '\033[0m'

# Closest terminal equivalents of the client palette
_ANSI_CODES: dict[str, str] = {
    '0': '\033[0;30m',
    '1': '\033[0;34m',
    '2': '\033[0;32m',
    '3': '\033[0;36m',
    '4': '\033[0;31m',
    '5': '\033[0;35m',
    '6': '\033[0;33m',
    '7': '\033[0;37m',
    '8': '\033[0;90m',
    '9': '\033[0;94m',
    'a': '\033[0;92m',
    'b': '\033[0;96m',
    'c': '\033[0;91m',
    'd': '\033[0;95m',
    'e': '\033[0;93m',
    'f': '\033[0;97m',
    'k': '\033[5m',
    'l': '\033[1m',
    'm': '\033[9m',
    'n': '\033[4m',
    'o': '\033[3m',
    'r': ANSI_RESET,
}


def translate_alternate_color_codes(text: str, alt_char: str = '&') -> str:
    """Replace ``alt_char`` + code pairs with the in-band escape.

    ``&c`` becomes ``\\u00a7c``; an ``alt_char`` that is not followed by a
    recognised code is kept as is.

    :param text: Raw template with markup.
    :param alt_char: Single markup character.
    :returns: Text ready to be shown by the client.
    """
    chars: list[str] = list(text)
    for index in range(len(chars) - 1):
        if chars[index] == alt_char and chars[index + 1] in COLOR_CODES:
            chars[index] = COLOR_CHAR
            chars[index + 1] = chars[index + 1].lower()
    return ''.join(chars)


def strip_colors(text: str) -> str:
    """Remove translated escapes, leaving plain text."""
    return _STRIP_RE.sub('', text)


def to_ansi(text: str) -> str:
    """Render translated escapes as ANSI terminal sequences."""
    emitted: bool = False

    def _replace(match: re.Match[str]) -> str:
        nonlocal emitted
        emitted = True
        return _ANSI_CODES[match.group(0)[1].lower()]

    converted: str = _STRIP_RE.sub(_replace, text)
    return converted + ANSI_RESET if emitted else converted
