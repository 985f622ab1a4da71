from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import PrivateAttr

from cordite.collection import Collection
from cordite.types import Snowflake

from .channel import Channel, GuildChannel, ThreadChannel
from .sticker import Sticker
from .member import Member
from .base import Base
from .role import Role

if TYPE_CHECKING:
    from cordite.client import Client


__all__ = (
    'Guild',
)


def _member_key(data: dict) -> int:
    return int(data.get('id') or data['user']['id'])


class Guild(Base):
    id: Snowflake
    name: str | None = None
    icon: str | None = None
    owner_id: Snowflake | None = None
    description: str | None = None
    features: list[str] = []
    preferred_locale: str = 'en-US'
    premium_tier: int = 0
    member_count: int | None = None
    unavailable: bool = False

    # ? created on first sync, always set once the guild is bound to a client
    _roles: Collection[Role] = PrivateAttr(default=None)
    _members: Collection[Member] = PrivateAttr(default=None)
    _channels: Collection[GuildChannel] = PrivateAttr(default=None)
    _threads: Collection[ThreadChannel] = PrivateAttr(default=None)
    _stickers: Collection[Sticker] = PrivateAttr(default=None)

    @classmethod
    def _prepare(cls, data: dict, client: Client) -> dict:
        # ? nested entities go into the guild's collections in _sync, not onto the model
        return {
            key: value
            for key, value in data.items()
            if key not in {'roles', 'members', 'channels', 'threads', 'stickers'}
        }

    def _sync(self, data: dict) -> None:
        client = self.client

        if self._roles is None:
            self._roles = Collection(Role, client)
            self._members = Collection(Member, client, key=_member_key)
            self._channels = Collection(Channel, client)  # type: ignore[arg-type]
            self._threads = Collection(Channel, client)  # type: ignore[arg-type]
            self._stickers = Collection(Sticker, client)

        for role in data.get('roles', []):
            self._roles.update(role, guild_id=self.id)

        for member in data.get('members', []):
            self._members.update(member, guild_id=self.id)

        for channel in data.get('channels', []):
            client.channel_guild_map[int(channel['id'])] = self.id
            self._channels.update(channel, guild_id=self.id)

        for thread in data.get('threads', []):
            client.thread_guild_map[int(thread['id'])] = self.id
            self._threads.update(thread, guild_id=self.id)

        for sticker in data.get('stickers', []):
            self._stickers.update(sticker, guild_id=self.id)

    @property
    def roles(self) -> Collection[Role]:
        return self._roles

    @property
    def members(self) -> Collection[Member]:
        return self._members

    @property
    def channels(self) -> Collection[GuildChannel]:
        return self._channels

    @property
    def threads(self) -> Collection[ThreadChannel]:
        return self._threads

    @property
    def stickers(self) -> Collection[Sticker]:
        return self._stickers

    @property
    def owner(self) -> Member | None:
        if self.owner_id is None:
            return None

        return self._members.get(self.owner_id)
