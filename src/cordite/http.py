from __future__ import annotations

from aiohttp import __version__ as aiohttp_version, ClientResponse
from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING
from io import BytesIO
from urllib.parse import quote
from sys import version_info

from orjson import loads

from .errors import (
    HTTPException,
    Unauthorized,
    ServerError,
    BadRequest,
    Forbidden,
    NotFound
)
from .version import VERSION

if TYPE_CHECKING:
    from io import BufferedIOBase


__all__ = (
    'File',
    'Route',
    'USER_AGENT',
    'raise_for_status',
)


USER_AGENT = ' '.join([
    f'DiscordBot (https://github.com/cordite-py/cordite, {VERSION})',
    f'Python/{'.'.join([str(i) for i in version_info[:3]])}',
    f'aiohttp/{aiohttp_version}'
])


class Route:
    def __init__(
        self,
        method: str,
        path: str,
        **params  # noqa: ANN003
    ) -> None:
        self.method = method
        self.path = path
        self.params = params

        self.url = path.format(**{
            k: quote(v) if isinstance(v, str) else v
            for k, v in params.items()
        }) if params else path

    def __repr__(self) -> str:
        return f'Route({self.method} {self.path})'


@dataclass
class File:
    """an attachment uploaded alongside a request

    `data` may be raw bytes or any seekable binary stream, the stream is
    rewound to where it started before every upload.
    """
    data: bytes | BufferedIOBase
    filename: str | None = None
    description: str | None = None
    spoiler: bool = False
    _start: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.data, bytes | bytearray):
            self.data = BytesIO(self.data)

        self._start = self.data.tell()

        if self.filename is None:
            return

        if self.filename.startswith('SPOILER_'):
            self.spoiler = True
        elif self.spoiler:
            self.filename = f'SPOILER_{self.filename}'

    def reset(self) -> None:
        self.data.seek(self._start)

    def as_payload_dict(self, index: int) -> dict[str, Any]:
        """the entry for this file in the payload's attachments list"""
        payload: dict[str, Any] = {'id': index, 'filename': self.filename}

        if self.description is not None:
            payload['description'] = self.description

        return payload

    def as_form_dict(self, index: int) -> dict[str, Any]:
        """keyword arguments for `FormData.add_field`"""
        return {
            'name': f'files[{index}]',
            'value': self.data,
            'filename': self.filename,
            'content_type': 'application/octet-stream'
        }


async def json_or_text(response: ClientResponse) -> dict[str, Any] | list[Any] | str:
    text = await response.text(encoding='utf-8')

    if response.headers.get('content-type', '').startswith('application/json'):
        return loads(text)

    return text


def raise_for_status(status: int, data: Any) -> None:  # noqa: ANN401
    if 300 > status >= 200:
        return

    match status:
        case 400:
            raise BadRequest(data)
        case 401:
            raise Unauthorized(data)
        case 403:
            raise Forbidden(data)
        case 404:
            raise NotFound(data)
        case _ if status >= 500:
            raise ServerError(data, status)
        case _:
            raise HTTPException(data, status)
