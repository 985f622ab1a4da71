from __future__ import annotations

from typing import TYPE_CHECKING
from datetime import datetime

from cordite.enums import MessageType, MessageFlag
from cordite.types import Snowflake

from .member import Member
from .base import Base
from .user import User

if TYPE_CHECKING:
    from cordite.client import Client

    from .channel import Channel
    from .guild import Guild


__all__ = (
    'Message',
)


class Message(Base):
    id: Snowflake
    channel_id: Snowflake
    # ? not always sent by discord, filled in from the surrounding event
    guild_id: Snowflake | None = None
    author: User
    member: Member | None = None
    content: str = ''
    timestamp: datetime
    edited_timestamp: datetime | None = None
    tts: bool = False
    mention_everyone: bool = False
    mention_roles: list[Snowflake] = []
    pinned: bool = False
    webhook_id: Snowflake | None = None
    application_id: Snowflake | None = None
    type: MessageType = MessageType.DEFAULT
    flags: MessageFlag = MessageFlag.NONE
    # ? i don't care enough to model these, they only pass through
    embeds: list[dict] = []
    attachments: list[dict] = []
    components: list[dict] = []
    sticker_items: list[dict] = []

    @classmethod
    def _prepare(cls, data: dict, client: Client) -> dict:
        author = data['author']

        if isinstance(author, dict):
            # ? webhook authors are not real users, don't cache them
            author = (
                User.from_raw(author, client)
                if data.get('webhook_id') is not None else
                client.users.update(author)
            )

        member = data.get('member')

        if isinstance(member, dict) and data.get('guild_id') is not None:
            member = client.update_member(
                data['guild_id'],
                author.id,
                {**member, 'user': author})

        return {**data, 'author': author, 'member': member}

    @property
    def channel(self) -> Channel | None:
        return self.client.get_channel(self.channel_id)

    @property
    def guild(self) -> Guild | None:
        if self.guild_id is None:
            return None

        return self.client.guilds.get(self.guild_id)

    @property
    def jump_url(self) -> str:
        return 'https://discord.com/channels/{guild}/{channel_id}/{id}'.format(
            guild=self.guild_id or '@me',
            channel_id=self.channel_id,
            id=self.id
        )
