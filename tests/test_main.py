"""Checks the console preview entrypoint."""

from __future__ import annotations

from pathlib import Path

import pytest

import messenger.main as main
from messenger.messages import MessageCatalog, MessageEntry, Msg
from messenger.messages.properties import read_properties
from tests.conftest import FakeSender


@pytest.mark.parametrize(
    ('template', 'expected'),
    [
        ('No placeholders', ()),
        ('Data: %s', ('<arg1>',)),
        ('%d coins for %s (100%%)', (42, '<arg2>')),
        ('Ratio %.2f', (42,)),
    ],
)
def test_sample_arguments(template: str, expected: tuple[object, ...]) -> None:
    assert main.sample_arguments(template) == expected
    assert isinstance(template % expected, str)


def test_preview_sends_every_message(fake_sender: FakeSender) -> None:
    catalog = MessageCatalog()
    main.preview(catalog, 'Steve')

    assert len(fake_sender.sent_messages) == len(catalog)
    texts: list[object] = [payload['text'] for payload in fake_sender.sent_messages]
    assert catalog.render(Msg.EXAMPLE_FORMATTED, '<arg1>') in texts
    assert {payload['recipient'] for payload in fake_sender.sent_messages} == {'Steve'}


def test_preview_skips_broken_templates(fake_sender: FakeSender) -> None:
    catalog = MessageCatalog([MessageEntry('BROKEN', '100% wrong', uses_prefix=False), MessageEntry('FINE', 'ok')])
    main.preview(catalog)

    assert [payload['text'] for payload in fake_sender.sent_messages] == ['ok']


def test_main_creates_file_and_prints_messages(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(main, 'configure_logging', lambda **kwargs: None)
    path: Path = tmp_path / 'messages.properties'

    main.main([str(path), '--no-ansi', '--header', 'Preview'])

    output: list[str] = capsys.readouterr().out.splitlines()
    assert len(output) == 5
    assert output[1] == '[console] [MyPlugin] This is the default value'
    assert '[console] [MyPlugin] This is a string with some data in it: <arg1>' in output
    assert read_properties(path)['exampleColor'] == 'This is a string with some &ccolor in it'
    assert path.read_text(encoding='ascii').startswith('#Preview\n')
