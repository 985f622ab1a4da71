from __future__ import annotations

from typing import TYPE_CHECKING

from cordite.enums import StickerType, StickerFormatType
from cordite.types import Snowflake

from .base import Base
from .user import User

if TYPE_CHECKING:
    from cordite.client import Client

    from .guild import Guild


__all__ = (
    'Sticker',
    'StickerPack',
)


class Sticker(Base):
    id: Snowflake
    pack_id: Snowflake | None = None
    """for standard stickers, id of the pack the sticker is from"""
    name: str
    description: str | None = None
    tags: str = ''
    """autocomplete/suggestion tags for the sticker (max 200 characters)"""
    type: StickerType
    format_type: StickerFormatType
    available: bool = True
    guild_id: Snowflake | None = None
    user: User | None = None
    """the user that uploaded the guild sticker"""
    sort_value: int | None = None

    @classmethod
    def _prepare(cls, data: dict, client: Client) -> dict:
        if isinstance(user := data.get('user'), dict):
            return {**data, 'user': client.users.update(user)}

        return data

    @property
    def filename(self) -> str:
        ext = self.format_type.file_extension if self.format_type != StickerFormatType.APNG else 'gif'
        return f'{self.name}.{ext}'

    @property
    def url(self) -> str:
        host = (
            'media.discordapp.net'
            if self.format_type == StickerFormatType.GIF else
            'cdn.discordapp.com'
        )

        return f'https://{host}/stickers/{self.id}.{self.format_type.file_extension}'

    @property
    def guild(self) -> Guild | None:
        if self.guild_id is None:
            return None

        return self.client.guilds.get(self.guild_id)


class StickerPack(Base):
    id: Snowflake
    stickers: list[Sticker]
    name: str
    sku_id: Snowflake
    cover_sticker_id: Snowflake | None = None
    description: str = ''
    banner_asset_id: Snowflake | None = None

    @classmethod
    def _prepare(cls, data: dict, client: Client) -> dict:
        return {
            **data,
            'stickers': [
                sticker
                if isinstance(sticker, Sticker) else
                client.convert_sticker(sticker)
                for sticker in data.get('stickers', [])
            ]
        }
