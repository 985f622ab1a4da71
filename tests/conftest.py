"""shared fixtures

the transport is never real, `client.rest.request` is an AsyncMock so
tests can script responses and inspect what would have been sent.
"""

from unittest.mock import AsyncMock

import logfire
import pytest

from cordite import Client

from tests import factories


logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def client():
    """a client with empty caches and a mocked transport"""
    client = Client(token='test-token')
    client.rest.request = AsyncMock(return_value=None)
    return client


@pytest.fixture
def guild_client(client):
    """a client with the test guild, its roles and its text channel cached"""
    client.handle_guild_create(factories.guild())
    return client


@pytest.fixture
def warnings_log(monkeypatch):
    """capture logfire.warn calls as (message, attributes) pairs"""
    calls: list[tuple[str, dict]] = []

    def warn(msg_template, **attributes):
        calls.append((msg_template, attributes))

    monkeypatch.setattr(logfire, 'warn', warn)
    return calls
