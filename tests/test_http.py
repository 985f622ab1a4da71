"""routes, status mapping and the request plumbing"""

from unittest.mock import AsyncMock, MagicMock
from io import BytesIO

from aiohttp import FormData
from orjson import dumps
import pytest

from cordite import (
    HTTPException,
    Unauthorized,
    RESTManager,
    ServerError,
    BadRequest,
    Forbidden,
    NotFound,
    Route,
    File,
    Env
)
from cordite.http import USER_AGENT, raise_for_status
from cordite.log import configure_logfire


def fake_session(status=200, body='{"id": "1"}', content_type='application/json'):
    response = MagicMock(status=status, headers={'content-type': content_type})
    response.text = AsyncMock(return_value=body)

    session = MagicMock(closed=False)
    session.request.return_value.__aenter__.return_value = response
    session.request.return_value.__aexit__.return_value = None
    return session


@pytest.fixture
def manager(client):
    manager = RESTManager(client, 'secret', 'https://example.test/api')
    manager._session = fake_session()
    return manager


class TestRoute:
    def test_formats_params(self):
        route = Route('GET', '/channels/{channel_id}', channel_id=123)

        assert route.url == '/channels/123'
        assert route.path == '/channels/{channel_id}'

    def test_quotes_string_params(self):
        route = Route('GET', '/things/{name}', name='a b')

        assert route.url == '/things/a%20b'


class TestRaiseForStatus:
    @pytest.mark.parametrize(('status', 'exception'), [
        (400, BadRequest),
        (401, Unauthorized),
        (403, Forbidden),
        (404, NotFound),
        (500, ServerError),
        (503, ServerError),
        (418, HTTPException),
    ])
    def test_maps_status(self, status, exception):
        with pytest.raises(exception) as exc_info:
            raise_for_status(status, {'message': 'nope'})

        assert exc_info.value.status_code == status
        assert exc_info.value.detail == {'message': 'nope'}

    @pytest.mark.parametrize('status', [200, 201, 204])
    def test_success_passes(self, status):
        raise_for_status(status, None)


class TestRESTManager:
    async def test_auth_request_sends_token(self, manager):
        result = await manager.auth_request(Route('GET', '/applications/@me'))

        method, url = manager._session.request.call_args.args
        headers = manager._session.request.call_args.kwargs['headers']

        assert result == {'id': '1'}
        assert (method, url) == ('GET', 'https://example.test/api/applications/@me')
        assert headers['Authorization'] == 'Bot secret'
        assert headers['User-Agent'] == USER_AGENT

    async def test_unauthenticated_request_has_no_token(self, manager):
        await manager.request(Route('POST', '/callback'), json={'type': 6})

        kwargs = manager._session.request.call_args.kwargs

        assert 'Authorization' not in kwargs['headers']
        assert kwargs['headers']['Content-Type'] == 'application/json'
        assert kwargs['data'] == dumps({'type': 6})

    async def test_reason_header(self, manager):
        await manager.request(Route('PATCH', '/channels/1'), reason='spring cleaning')

        headers = manager._session.request.call_args.kwargs['headers']

        assert headers['X-Audit-Log-Reason'] == 'spring cleaning'

    async def test_auth_without_token(self, client):
        manager = RESTManager(client, None, 'https://example.test/api')
        manager.token = None
        manager._session = fake_session()

        with pytest.raises(Unauthorized):
            await manager.auth_request(Route('GET', '/applications/@me'))

        manager._session.request.assert_not_called()

    async def test_error_status_raises(self, manager):
        manager._session = fake_session(404, '{"message": "Unknown Channel"}')

        with pytest.raises(NotFound) as exc_info:
            await manager.request(Route('GET', '/channels/1'))

        assert exc_info.value.detail == {'message': 'Unknown Channel'}

    async def test_no_content(self, manager):
        manager._session = fake_session(204, '', 'text/plain')

        assert await manager.request(Route('DELETE', '/channels/1')) is None


class TestEnv:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv('CORDITE_TOKEN', 'token')
        monkeypatch.setenv('CORDITE_API_URL', 'https://example.test/api')
        monkeypatch.setenv('CORDITE_DEV', '1')
        monkeypatch.delenv('CORDITE_LOGFIRE_TOKEN', raising=False)

        env = Env.new()

        assert env.bot_token == 'token'
        assert env.api_url == 'https://example.test/api'
        assert env.logfire_token == ''
        assert env.dev is True

    def test_defaults(self, monkeypatch):
        for name in ('CORDITE_TOKEN', 'CORDITE_API_URL', 'CORDITE_DEV'):
            monkeypatch.delenv(name, raising=False)

        env = Env.new()

        assert env.api_url == 'https://discord.com/api/v10'
        assert env.dev is False


class TestFile:
    def test_bytes_become_a_stream(self):
        file = File(b'data', 'data.txt')

        assert file.data.read() == b'data'

        file.reset()

        assert file.data.read() == b'data'

    def test_reset_returns_to_start(self):
        stream = BytesIO(b'headerdata')
        stream.seek(6)

        file = File(stream, 'data.txt')
        file.data.read()
        file.reset()

        assert file.data.read() == b'data'

    def test_spoiler_prefix(self):
        assert File(b'', 'cat.png', spoiler=True).filename == 'SPOILER_cat.png'
        assert File(b'', 'SPOILER_cat.png').spoiler is True
        assert File(b'', 'SPOILER_cat.png', spoiler=True).filename == 'SPOILER_cat.png'

    def test_payload_dict(self):
        assert File(b'', 'a.txt').as_payload_dict(0) == {'id': 0, 'filename': 'a.txt'}
        assert File(b'', 'a.txt', 'alt').as_payload_dict(1) == {
            'id': 1, 'filename': 'a.txt', 'description': 'alt'}

    async def test_files_are_sent_as_multipart(self, manager):
        await manager.auth_request(
            Route('POST', '/webhooks/1/token'),
            json={'content': 'hi'},
            files=[File(b'data', 'data.txt')]
        )

        kwargs = manager._session.request.call_args.kwargs

        assert isinstance(kwargs['data'], FormData)
        assert 'Content-Type' not in kwargs['headers']


class TestConfigureLogfire:
    def test_dev_service_name(self, monkeypatch):
        calls = []
        monkeypatch.setattr('logfire.configure', lambda **kwargs: calls.append(kwargs))
        monkeypatch.setattr(
            'logfire.instrument_aiohttp_client',
            lambda: pytest.fail('instrumented without a token'))

        configure_logfire(Env(
            bot_token='', api_url='', logfire_token='', dev=True))

        assert calls[0]['service_name'] == 'cordite-dev'
        assert calls[0]['send_to_logfire'] == 'if-token-present'
        assert calls[0]['token'] is None
