"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from domain.entities.update import InboundUpdate, Sender


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing."""

    def __init__(self) -> None:
        self.posts = AsyncMock()
        self.profiles = AsyncMock()
        self.entered = 0

    async def __aenter__(self) -> "FakeUnitOfWork":
        self.entered += 1
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def chat_id() -> int:
    return 424242


@pytest.fixture
def sender() -> Sender:
    return Sender(id=777001, username="jdoe", first_name="Jane")


@pytest.fixture
def make_update(chat_id: int, sender: Sender):
    """Build an inbound update for the given text from the default sender."""

    def _make(text: str | None) -> InboundUpdate:
        return InboundUpdate(chat_id=chat_id, text=text, sender=sender)

    return _make
