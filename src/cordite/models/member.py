from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from cordite.enums import GuildMemberFlag, Permission
from cordite.errors import MalformedPayload, UncachedError
from cordite.types import Snowflake

from .base import Base
from .user import User

if TYPE_CHECKING:
    from cordite.client import Client

    from .guild import Guild


__all__ = (
    'Member',
)


class Member(Base):
    guild_id: Snowflake | None = None
    """the id of the guild this member belongs to"""
    user: User
    """the user this guild member represents"""
    nick: str | None = None
    avatar: str | None = None
    banner: str | None = None
    roles: list[Snowflake] = []
    joined_at: datetime | None = None
    premium_since: datetime | None = None
    deaf: bool = False
    mute: bool = False
    flags: GuildMemberFlag = GuildMemberFlag.NONE
    pending: bool = False
    permissions: Permission | None = None
    """total permissions of the member in the channel, including overwrites, only present on interactions"""
    communication_disabled_until: datetime | None = None

    @classmethod
    def _prepare(cls, data: dict, client: Client) -> dict:
        user = data.get('user')

        match user:
            case User():
                pass
            case dict():
                user = client.users.update(user)
            case None if (
                data.get('id') is not None and
                (cached := client.users.get(data['id'])) is not None
            ):
                user = cached
            case _:
                raise MalformedPayload(
                    'member payload has no user and the user is not cached')

        return {**data, 'user': user}

    @property
    def id(self) -> Snowflake:
        return self.user.id

    @property
    def username(self) -> str:
        return self.user.username

    @property
    def mention(self) -> str:
        return f'<@{self.id}>'

    @property
    def display_name(self) -> str:
        return self.nick or self.user.display_name

    @property
    def communication_disabled(self) -> bool:
        return (
            self.communication_disabled_until is not None
            and self.communication_disabled_until > datetime.now(timezone.utc)
        )

    @property
    def guild(self) -> Guild:
        guild = (
            self.client.guilds.get(self.guild_id)
            if self.guild_id is not None
            else None
        )

        if guild is None:
            raise UncachedError(self, 'guild', 'guilds', self.guild_id)

        return guild
