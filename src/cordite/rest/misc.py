from __future__ import annotations

from typing import TYPE_CHECKING
from warnings import warn

from cordite.models.application import Application, ClientApplication
from cordite.models.sticker import Sticker, StickerPack
from cordite.models.voice import VoiceRegion
from cordite.http import Route

if TYPE_CHECKING:
    from .manager import RESTManager


__all__ = (
    'Miscellaneous',
)


class Miscellaneous:
    """routes that don't fit anywhere else"""

    def __init__(self, manager: RESTManager) -> None:
        self._manager = manager

    async def get_application(self) -> Application:
        """the application of the current bot"""
        return Application.from_raw(
            await self._manager.auth_request(
                Route('GET', '/applications/@me')),
            self._manager.client
        )

    async def get_client_application(self) -> ClientApplication:
        """the application of the current bot, as a bare `ClientApplication`"""
        return ClientApplication.from_raw(
            await self._manager.auth_request(
                Route('GET', '/applications/@me')),
            self._manager.client
        )

    async def get_sticker(self, sticker_id: int) -> Sticker:
        """guild stickers are cached when their guild is"""
        return self._manager.client.convert_sticker(
            await self._manager.auth_request(
                Route('GET', '/stickers/{sticker_id}', sticker_id=sticker_id))
        )

    async def get_sticker_packs(self) -> list[StickerPack]:
        data = await self._manager.auth_request(
            Route('GET', '/sticker-packs'))

        return [
            StickerPack.from_raw(pack, self._manager.client)
            for pack in data['sticker_packs']
        ]

    async def get_nitro_sticker_packs(self) -> list[StickerPack]:
        warn(
            'get_nitro_sticker_packs is deprecated, use get_sticker_packs',
            DeprecationWarning,
            stacklevel=2
        )

        return await self.get_sticker_packs()

    async def get_voice_regions(self) -> list[VoiceRegion]:
        return [
            VoiceRegion(**region)
            for region in await self._manager.auth_request(
                Route('GET', '/voice/regions'))
        ]
