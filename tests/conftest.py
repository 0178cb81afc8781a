"""Shared test fixtures for Reflect backend tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from common.ai import OpenAIProvider


class FirstChoiceRng:
    """Deterministic random source: always picks the first option."""

    def __init__(self):
        self.calls = []

    def choice(self, seq):
        self.calls.append(tuple(seq))
        return seq[0]


@pytest.fixture
def rng():
    return FirstChoiceRng()


@pytest.fixture
def mock_provider():
    """A configured provider whose completion can be scripted per test."""
    provider = MagicMock()
    provider.is_configured = MagicMock(return_value=True)
    provider.complete = AsyncMock(return_value="A thoughtful reply from the model.")
    return provider


@pytest.fixture
def failing_provider(mock_provider):
    mock_provider.complete = AsyncMock(side_effect=RuntimeError("connection reset"))
    return mock_provider


@pytest.fixture
def unconfigured_provider():
    """Real provider with a malformed key and a client that must not be called."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    return OpenAIProvider(api_key="not-a-key", client=client)


@pytest.fixture
def greeting_conversation():
    return [{"role": "user", "content": "hello, how are you"}]


@pytest.fixture
def long_conversation():
    return [
        {"role": "user" if i % 2 == 0 else "assistant", "content": f"message {i}"}
        for i in range(15)
    ]
