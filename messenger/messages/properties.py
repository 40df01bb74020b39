"""Reads and writes the flat ``key=value`` messages file.

The format follows Java ``.properties`` files so that stores written by
earlier plugin versions stay readable: ``#``/``!`` comments, ``=``, ``:`` or
whitespace separators, backslash escapes and continuation lines.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from datetime import datetime
from pathlib import Path

from messenger.errors import FileAccessError, PersistenceWriteError

_SEPARATORS: str = '=:'
_WHITESPACE: str = ' \t\f'
_ESCAPES: dict[str, str] = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}
_REVERSE_ESCAPES: dict[str, str] = {value: f'\\{key}' for key, value in _ESCAPES.items()}
_SPECIAL: str = '=:#!'
_LINE_BREAK_RE = re.compile(r'\r\n|\r|\n')
_HEX4_RE = re.compile(r'[0-9A-Fa-f]{4}')


def _logical_lines(text: str) -> Iterator[str]:
    """Join continuation lines and skip comments and blanks."""
    buffer: list[str] = []
    for raw_line in _LINE_BREAK_RE.split(text):
        line: str = raw_line.lstrip(_WHITESPACE)
        if not buffer and (not line or line[0] in '#!'):
            continue
        trailing: int = len(line) - len(line.rstrip('\\'))
        if trailing % 2 == 1:
            buffer.append(line[:-1])
            continue
        buffer.append(line)
        yield ''.join(buffer)
        buffer = []
    if buffer:
        yield ''.join(buffer)


def _unescape(text: str) -> str:
    result: list[str] = []
    index: int = 0
    length: int = len(text)
    while index < length:
        char: str = text[index]
        index += 1
        if char != '\\' or index >= length:
            result.append(char)
            continue
        char = text[index]
        index += 1
        if char == 'u':
            code: str = text[index:index + 4]
            if not _HEX4_RE.fullmatch(code):
                raise ValueError(f'Malformed \\uXXXX escape: \\u{code}')
            result.append(chr(int(code, 16)))
            index += 4
        else:
            result.append(_ESCAPES.get(char, char))
    # Surrogate pairs written by Java become one code point again
    return ''.join(result).encode('utf-16-le', 'surrogatepass').decode('utf-16-le', 'surrogatepass')


def _split_pair(line: str) -> tuple[str, str]:
    """Split a logical line into raw key and raw value."""
    index: int = 0
    length: int = len(line)
    while index < length:
        char: str = line[index]
        if char == '\\':
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1
    key_end: int = min(index, length)
    # Skip whitespace, at most one separator, then whitespace again
    while index < length and line[index] in _WHITESPACE:
        index += 1
    if index < length and line[index] in _SEPARATORS:
        index += 1
    while index < length and line[index] in _WHITESPACE:
        index += 1
    return line[:key_end], line[index:]


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into an ordered mapping.

    :param text: File contents.
    :raises ValueError: on a malformed ``\\u`` escape.
    :returns: Keys in order of first appearance; later duplicates win.
    """
    properties: dict[str, str] = {}
    for line in _logical_lines(text):
        raw_key, raw_value = _split_pair(line)
        properties[_unescape(raw_key)] = _unescape(raw_value)
    return properties


def _unicode_escape(char: str) -> str:
    """Write a character as ``\\uXXXX``, astral ones as a surrogate pair."""
    data: bytes = char.encode('utf-16-be', 'surrogatepass')
    units: list[int] = [int.from_bytes(data[offset:offset + 2], 'big') for offset in range(0, len(data), 2)]
    return ''.join(f'\\u{unit:04X}' for unit in units)


def _escape(text: str, *, is_key: bool) -> str:
    result: list[str] = []
    for position, char in enumerate(text):
        if char == '\\':
            result.append('\\\\')
        elif char in _REVERSE_ESCAPES:
            result.append(_REVERSE_ESCAPES[char])
        elif char == ' ' and (is_key or position == 0):
            result.append('\\ ')
        elif char in _SPECIAL:
            result.append('\\' + char)
        elif ord(char) < 0x20 or ord(char) > 0x7E:
            result.append(_unicode_escape(char))
        else:
            result.append(char)
    return ''.join(result)


def _format_comment(comment: str) -> list[str]:
    lines: list[str] = []
    for number, line in enumerate(_LINE_BREAK_RE.split(comment)):
        escaped: str = ''.join(
            char if 0x20 <= ord(char) <= 0x7E or char == '\t' else _unicode_escape(char) for char in line
        )
        # First line is always commented, later ones unless they already are
        lines.append('#' + escaped if number == 0 or escaped[:1] not in ('#', '!') else escaped)
    return lines


def format_properties(
    properties: Mapping[str, str],
    header: str | None = None,
    *,
    timestamp: datetime | None = None,
) -> str:
    """Serialise a mapping as properties text.

    :param properties: Entries written in mapping order.
    :param header: Optional free text emitted as a leading comment block.
    :param timestamp: Moment written in the date comment, ``now`` by default.
    :returns: ASCII text with a trailing newline.
    """
    moment: datetime = timestamp if timestamp is not None else datetime.now().astimezone()
    lines: list[str] = []
    if header is not None:
        lines.extend(_format_comment(header))
    lines.append('#' + moment.strftime('%a %b %d %H:%M:%S %Z %Y'))
    for key, value in properties.items():
        lines.append(f'{_escape(key, is_key=True)}={_escape(value, is_key=False)}')
    return '\n'.join(lines) + '\n'


def read_properties(path: Path) -> dict[str, str]:
    """Read a properties file, accepting UTF-8 or Latin-1 content.

    :raises FileAccessError: if the file cannot be opened or parsed.
    """
    try:
        payload: bytes = path.read_bytes()
    except OSError as exc:
        raise FileAccessError(f'Cannot read messages file {path}: {exc}') from exc
    try:
        text: str = payload.decode('utf-8')
    except UnicodeDecodeError:
        text = payload.decode('latin-1')
    try:
        return parse_properties(text)
    except ValueError as exc:
        raise FileAccessError(f'Malformed messages file {path}: {exc}') from exc


def write_properties(path: Path, properties: Mapping[str, str], header: str | None = None) -> None:
    """Write a properties file, replacing previous contents.

    :raises PersistenceWriteError: if the file cannot be written.
    """
    try:
        path.write_text(format_properties(properties, header), encoding='ascii')
    except OSError as exc:
        raise PersistenceWriteError(f'Cannot write messages file {path}: {exc}') from exc
