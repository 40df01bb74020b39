"""Logging setup shared by the entry points."""

from __future__ import annotations

import json
import logging
import logging.config
from pathlib import Path
from typing import Any

from messenger.config import LOG_LEVEL


def _resolve_log_level(target_level: str | None) -> str | None:
    """Normalise a configured level to its name.

    Accepts names in any case (``debug``) and numeric values (``10``).

    :param target_level: Raw value from ``LOG_LEVEL`` or the command line.
    :returns: Upper-case level name, ``None`` when empty or unknown.
    """
    normalized: str = (target_level or '').strip()
    if not normalized:
        return None
    if normalized.isdigit():
        level_name: str = logging.getLevelName(int(normalized))
        return None if level_name.startswith('Level ') else level_name
    upper_level: str = normalized.upper()
    return upper_level if isinstance(logging.getLevelName(upper_level), int) else None


def _apply_log_level_override(config_data: dict[str, Any], level_name: str) -> None:
    handlers_obj: object = config_data.get('handlers')
    targets: list[object] = list(handlers_obj.values()) if isinstance(handlers_obj, dict) else []
    targets.append(config_data.get('root'))
    for section in targets:
        if isinstance(section, dict):
            section['level'] = level_name


def configure_logging(config_path: Path | None = None, level: str | None = None) -> None:
    """Load logging configuration from ``logging.conf`` or apply defaults.

    :param config_path: JSON dictConfig file, ``logging.conf`` in the project root by default.
    :param level: Level overriding ``LOG_LEVEL``.
    """
    target_path: Path = config_path if config_path is not None else Path(__file__).resolve().parents[1] / 'logging.conf'
    level_name: str | None = _resolve_log_level(level or LOG_LEVEL)
    try:
        with target_path.open('r', encoding='utf-8') as config_file:
            config_data: dict[str, Any] = json.load(config_file)
    except FileNotFoundError:
        logging.basicConfig(level=level_name or logging.INFO)
        logging.getLogger(__name__).warning('logging.conf not found (%s), using basic configuration', target_path)
    except json.JSONDecodeError as exc:
        logging.basicConfig(level=level_name or logging.INFO)
        message_invalid: str = 'Cannot read logging.conf (%s): %s, using basic configuration'
        logging.getLogger(__name__).warning(message_invalid, target_path, exc)
    else:
        if level_name:
            _apply_log_level_override(config_data, level_name)
        logging.config.dictConfig(config_data)
