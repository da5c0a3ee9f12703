"""Root conftest — shared test configuration."""

import pytest

from chatroom.core.chat_registry import ChatRegistry


@pytest.fixture
def registry():
    """Fresh registry per test — no state shared across tests."""
    return ChatRegistry()
