from __future__ import annotations

from typing import Any, TYPE_CHECKING
from enum import Enum

from cordite.missing import drop_missing
from cordite.http import Route

if TYPE_CHECKING:
    from cordite.models.channel import Channel

    from .manager import RESTManager


__all__ = (
    'Channels',
)


class Channels:
    def __init__(self, manager: RESTManager) -> None:
        self._manager = manager

    async def edit(
        self,
        channel_id: int,
        *,
        reason: str | None = None,
        **options: Any  # noqa: ANN401
    ) -> Channel:
        """edit a channel, options left as `MISSING` are not sent

        the updated channel goes through the client cache.
        """
        json = {
            key: value.value if isinstance(value, Enum) else value
            for key, value in drop_missing(options).items()
        }

        return self._manager.client.update_channel(
            await self._manager.auth_request(
                Route('PATCH', '/channels/{channel_id}', channel_id=channel_id),
                json=json,
                reason=reason
            )
        )
