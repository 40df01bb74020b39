"""Console entrypoint: load the messages file and preview every message."""

from __future__ import annotations

import argparse
import logging
import re
from collections.abc import Sequence
from pathlib import Path

from messenger.config import ALT_COLOR_CHAR, CONSOLE_ANSI, MESSAGES_HEADER, MESSAGES_PATH
from messenger.messages import MessageCatalog
from messenger.sender import ConsoleSender
from messenger.utils import configure_logging

logger: logging.Logger = logging.getLogger(__name__)

CONSOLE_RECIPIENT: str = 'console'

_PLACEHOLDER_RE = re.compile(r'%%|%[-#0 +]*\d*(?:\.\d+)?([diouxXeEfFgGcrsa])')
_NUMERIC_CONVERSIONS: str = 'diouxXeEfFgGc'


def sample_arguments(template: str) -> tuple[object, ...]:
    """Build placeholder values so that ``template % values`` succeeds."""
    values: list[object] = []
    for match in _PLACEHOLDER_RE.finditer(template):
        conversion: str | None = match.group(1)
        if conversion is None:
            continue
        values.append(42 if conversion in _NUMERIC_CONVERSIONS else f'<arg{len(values) + 1}>')
    return tuple(values)


def preview(catalog: MessageCatalog, recipient: object = CONSOLE_RECIPIENT) -> None:
    """Send every catalog entry to ``recipient``."""
    for item in catalog:
        args: tuple[object, ...] = sample_arguments(catalog.current_value(item.key))
        try:
            catalog.send(recipient, item.key, *args)
        except (TypeError, ValueError) as exc:
            logger.error('Message %s cannot be formatted: %s', item.persisted_key, exc)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='messenger', description=__doc__)
    parser.add_argument('path', nargs='?', type=Path, default=MESSAGES_PATH, help='messages file to load')
    parser.add_argument('--header', default=MESSAGES_HEADER, help='comment written at the top of the file')
    parser.add_argument('--no-ansi', dest='ansi', action='store_false', default=CONSOLE_ANSI, help='strip colors')
    parser.add_argument('--log-level', default=None, help='override LOG_LEVEL')
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Load the messages file (creating it with defaults) and print all messages."""
    args: argparse.Namespace = _parse_args(argv)
    configure_logging(level=args.log_level)
    catalog = MessageCatalog(sender=ConsoleSender(ansi=args.ansi), alt_color_char=ALT_COLOR_CHAR)
    catalog.load(args.path, args.header)
    preview(catalog)


if __name__ == '__main__':
    main()
