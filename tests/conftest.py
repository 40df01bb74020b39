"""Shared fixtures for catalog tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from messenger.messages import MessageCatalog
from messenger.sender import MessageSender, configure_sender


class FakeSender(MessageSender):
    """Fake sink that records every delivery."""

    def __init__(self) -> None:
        self.sent_messages: list[dict[str, object]] = []

    def send_message(self, recipient: object, text: str) -> None:
        self.sent_messages.append({'recipient': recipient, 'text': text})


@pytest.fixture(autouse=True)
def fake_sender() -> Iterator[FakeSender]:
    """Register a fake sink for the duration of each test."""
    sender = FakeSender()
    configure_sender(sender)
    yield sender
    configure_sender(None)


@pytest.fixture()
def messages_path(tmp_path: Path) -> Path:
    """Messages file inside a temporary directory (not created yet)."""
    return tmp_path / 'lang' / 'messages.properties'


@pytest.fixture()
def catalog() -> MessageCatalog:
    return MessageCatalog()
