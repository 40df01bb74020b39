"""Checks environment parsing and logging setup."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path

import pytest

import messenger.config as config
import messenger.utils as utils


def test_env_helpers_fall_back_on_bad_values() -> None:
    assert config._env_bool(None, default=True) is True
    assert config._env_bool(' Yes ') is True
    assert config._env_bool('off', default=True) is False
    assert config._env_char('§', default='&') == '§'
    assert config._env_char('&&', default='&') == '&'
    assert config._env_text('Line one\\nLine two') == 'Line one\nLine two'
    assert config._env_text('   ') is None


def test_messages_path_from_directory_and_filename(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv('MESSAGES_PATH', raising=False)
    monkeypatch.setenv('MESSAGES_DIR', str(tmp_path))
    monkeypatch.setenv('MESSAGES_FILENAME', 'lang.properties')
    monkeypatch.setenv('ALT_COLOR_CHAR', '$')

    reloaded = importlib.reload(config)
    try:
        assert reloaded.MESSAGES_PATH == tmp_path / 'lang.properties'
        assert reloaded.ALT_COLOR_CHAR == '$'
    finally:
        monkeypatch.undo()
        importlib.reload(config)


@pytest.mark.parametrize(
    ('value', 'expected'),
    [('debug', 'DEBUG'), ('10', 'DEBUG'), ('', None), ('verbose', None), (None, None)],
)
def test_resolve_log_level(value: str | None, expected: str | None) -> None:
    assert utils._resolve_log_level(value) == expected


def test_configure_logging_applies_level_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path: Path = tmp_path / 'logging.conf'
    config_path.write_text(
        '{"version": 1, "disable_existing_loggers": false,'
        ' "handlers": {"console": {"class": "logging.StreamHandler", "level": "INFO"}},'
        ' "root": {"level": "INFO", "handlers": ["console"]}}',
        encoding='utf-8',
    )
    root: logging.Logger = logging.getLogger()
    monkeypatch.setattr(root, 'handlers', list(root.handlers))
    monkeypatch.setattr(root, 'level', root.level)

    utils.configure_logging(config_path, level='warning')

    assert root.level == logging.WARNING


def test_configure_logging_falls_back_when_file_missing(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: calls.append(kwargs))

    with caplog.at_level(logging.WARNING):
        utils.configure_logging(tmp_path / 'absent.conf', level='ERROR')

    assert calls == [{'level': 'ERROR'}]
    assert 'logging.conf not found' in caplog.text


def test_level_override_updates_handlers_and_root() -> None:
    config_data: dict[str, object] = {
        'handlers': {'console': {'level': 'INFO'}, 'file': {'level': 'DEBUG'}},
        'root': {'level': 'INFO'},
    }
    utils._apply_log_level_override(config_data, 'ERROR')

    assert config_data == {
        'handlers': {'console': {'level': 'ERROR'}, 'file': {'level': 'ERROR'}},
        'root': {'level': 'ERROR'},
    }
