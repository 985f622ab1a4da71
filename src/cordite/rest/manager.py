from __future__ import annotations

from typing import Any, TYPE_CHECKING
from urllib.parse import quote

from aiohttp import ClientSession, FormData
from orjson import dumps
import logfire

from cordite.http import USER_AGENT, json_or_text, raise_for_status
from cordite.errors import Unauthorized
from cordite.env import env

from .interactions import Interactions
from .misc import Miscellaneous
from .channels import Channels

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cordite.http import File, Route
    from cordite.client import Client


__all__ = (
    'RESTManager',
)


class RESTManager:
    """sends requests to the api, errors are raised as they come back

    no retries and no rate limit handling, both are left to the caller.
    """

    def __init__(
        self,
        client: Client,
        token: str | None = None,
        base_url: str | None = None
    ) -> None:
        self.client = client
        self.token = token
        self.base_url = base_url or env.api_url
        self._session: ClientSession | None = None

        self.channels = Channels(self)
        self.interactions = Interactions(self)
        self.misc = Miscellaneous(self)

    @property
    def session(self) -> ClientSession:
        if self._session is None or self._session.closed:
            self._session = ClientSession()

        return self._session

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()

        self._session = None

    def _headers(
        self,
        auth: bool,
        reason: str | None
    ) -> dict[str, str]:
        headers: dict[str, str] = {
            'User-Agent': USER_AGENT
        }

        if auth:
            if not self.token:
                raise Unauthorized(
                    'no token was provided for an authenticated request')

            headers['Authorization'] = f'Bot {self.token}'

        if reason:
            headers['X-Audit-Log-Reason'] = quote(reason, safe='/ ')

        return headers

    async def request(
        self,
        route: Route,
        *,
        json: dict[str, Any] | list[Any] | None = None,
        files: Sequence[File] | None = None,
        params: dict[str, str] | None = None,
        reason: str | None = None,
        auth: bool = False
    ) -> Any:  # noqa: ANN401
        headers = self._headers(auth, reason)
        data: bytes | FormData | None = None

        if files:
            data = FormData(quote_fields=False)

            if json is not None:
                data.add_field('payload_json', dumps(json).decode())

            for index, file in enumerate(files):
                file.reset()
                data.add_field(**file.as_form_dict(index))
        elif json is not None:
            headers['Content-Type'] = 'application/json'
            data = dumps(json)

        with logfire.span(
            '{method} {path}',
            method=route.method,
            path=route.path
        ):
            async with self.session.request(
                route.method,
                self.base_url + route.url,
                data=data,
                params=params,
                headers=headers
            ) as response:
                resp_data = await json_or_text(response)

                if not 300 > response.status >= 200:
                    logfire.debug(
                        '{method} {path} failed with status {status}',
                        method=route.method,
                        path=route.path,
                        status=response.status
                    )

                raise_for_status(response.status, resp_data)

                return resp_data if response.status != 204 else None

    async def auth_request(
        self,
        route: Route,
        **kwargs: Any  # noqa: ANN401
    ) -> Any:  # noqa: ANN401
        return await self.request(route, auth=True, **kwargs)
