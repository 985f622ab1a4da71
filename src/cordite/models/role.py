from __future__ import annotations

from typing import TYPE_CHECKING

from cordite.enums import Permission, RoleFlag
from cordite.errors import UncachedError
from cordite.types import Snowflake

from .base import Base

if TYPE_CHECKING:
    from .guild import Guild


__all__ = (
    'Role',
)


class Role(Base):
    guild_id: Snowflake | None = None
    """the id of the guild this role belongs to"""
    id: Snowflake
    """role id"""
    name: str
    """role name"""
    color: int = 0
    """integer representation of hexadecimal color code"""
    hoist: bool = False
    """if this role is pinned in the user listing"""
    icon: str | None = None
    """role icon hash"""
    unicode_emoji: str | None = None
    """role unicode emoji"""
    position: int = 0
    """position of this role (roles with the same position are sorted by id)"""
    permissions: Permission = Permission.NONE
    """permission bit set"""
    managed: bool = False
    """whether this role is managed by an integration"""
    mentionable: bool = False
    """whether this role is mentionable"""
    # too much effort to model
    # see https://discord.com/developers/docs/topics/permissions#role-object-role-tags-structure
    tags: dict | None = None
    """the tags this role has"""
    flags: RoleFlag = RoleFlag.NONE
    """role flags combined as a bitfield"""

    @property
    def mention(self) -> str:
        return f'<@&{self.id}>'

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
