from __future__ import annotations

from cordite.enums import UserFlag, PremiumType
from cordite.types import Snowflake

from .base import Base


__all__ = (
    'User',
)


class User(Base):
    id: Snowflake
    """the user's id"""
    username: str
    """the user's username, not unique across the platform"""
    discriminator: str = '0'
    """the user's discord-tag, `0` for migrated users"""
    global_name: str | None = None
    """the user's display name, if it is set. For bots, this is the application name"""
    avatar: str | None = None
    """the user's avatar hash"""
    bot: bool = False
    """whether the user belongs to an OAuth2 application"""
    system: bool = False
    """whether the user is an Official Discord System user (part of the urgent message system)"""
    banner: str | None = None
    """the user's banner hash"""
    accent_color: int | None = None
    """the user's banner color encoded as an integer representation of hexadecimal color code"""
    premium_type: PremiumType | None = None
    """the type of Nitro subscription on a user's account"""
    public_flags: UserFlag | None = None
    """the public flags on a user's account"""

    @property
    def mention(self) -> str:
        return f'<@{self.id}>'

    @property
    def tag(self) -> str:
        if self.discriminator in {'0', '0000'}:
            return self.username

        return f'{self.username}#{self.discriminator}'

    @property
    def display_name(self) -> str:
        return self.global_name or self.username

    @property
    def default_avatar_url(self) -> str:
        avatar = (
            (self.id >> 22) % 6
            if self.discriminator in {'0', '0000'} else
            int(self.discriminator) % 5)

        return f'https://cdn.discordapp.com/embed/avatars/{avatar}.png'

    @property
    def avatar_url(self) -> str:
        if self.avatar is None:
            return self.default_avatar_url

        return 'https://cdn.discordapp.com/avatars/{id}/{avatar}.{format}?size=1024'.format(
            id=self.id,
            avatar=self.avatar,
            format='gif' if self.avatar.startswith('a_') else 'png'
        )
