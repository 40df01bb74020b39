"""Messenger configuration: reading environment variables."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv())


def _env_bool(value: str | None, *, default: bool = False) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    return normalized in {'1', 'true', 'yes', 'on'}


def _env_char(value: str | None, *, default: str) -> str:
    """Return a single markup character.

    :param value: Raw environment value.
    :param default: Used when unset or not exactly one character long.
    """
    if value is None:
        return default
    stripped = value.strip()
    if len(stripped) != 1:
        return default
    return stripped


def _env_text(value: str | None) -> str | None:
    if value is None:
        return None
    # Allow multi-line headers written as \n in .env files
    text = value.replace('\\n', '\n').strip()
    return text or None


# Path to the messages properties file
_MESSAGES_PATH_ENV: str | None = os.getenv('MESSAGES_PATH')
if _MESSAGES_PATH_ENV:
    MESSAGES_PATH: Path = Path(_MESSAGES_PATH_ENV)
else:
    MESSAGES_DIR: Path = Path(os.getenv('MESSAGES_DIR', './data'))
    MESSAGES_FILENAME: str = os.getenv('MESSAGES_FILENAME', 'messages.properties').strip() or 'messages.properties'
    MESSAGES_PATH = MESSAGES_DIR / MESSAGES_FILENAME

# Comment written at the top of the messages file (none by default)
MESSAGES_HEADER: str | None = _env_text(os.getenv('MESSAGES_HEADER'))

# Markup character translated into color escapes
ALT_COLOR_CHAR: str = _env_char(os.getenv('ALT_COLOR_CHAR'), default='&')

# Render colors as ANSI sequences in the console preview
CONSOLE_ANSI: bool = _env_bool(os.getenv('CONSOLE_ANSI'), default=True)

# Log level for root/primary handlers
LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO').strip() or 'INFO'
