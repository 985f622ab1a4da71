from __future__ import annotations

from typing import Any, ClassVar, Self, TYPE_CHECKING
from datetime import datetime

from pydantic import PrivateAttr
import logfire

from cordite.missing import MISSING, Optional, Nullable
from cordite.errors import UncachedError
from cordite.collection import Collection
from cordite.types import Snowflake
from cordite.enums import (
    ThreadAutoArchiveDuration,
    OverwriteType,
    ChannelFlag,
    ChannelType,
    Permission
)

from .base import Base, RawBaseModel
from .message import Message
from .user import User

if TYPE_CHECKING:
    from cordite.client import Client

    from .guild import Guild


__all__ = (
    'AnnouncementChannel',
    'AnnouncementThreadChannel',
    'CategoryChannel',
    'Channel',
    'ForumChannel',
    'GroupChannel',
    'GuildChannel',
    'InteractionResolvedChannel',
    'Overwrite',
    'PrivateChannel',
    'PrivateThreadChannel',
    'PrivateThreadMetadata',
    'PublicThreadChannel',
    'StageChannel',
    'TextChannel',
    'ThreadChannel',
    'ThreadMetadata',
    'VoiceChannel',
)


class Overwrite(RawBaseModel):
    id: Snowflake
    """role or user id"""
    type: OverwriteType
    """either 0 (role) or 1 (member)"""
    allow: Permission = Permission.NONE
    """permission bit set"""
    deny: Permission = Permission.NONE
    """permission bit set"""


class ThreadMetadata(RawBaseModel):
    archived: bool
    """whether the thread is archived"""
    auto_archive_duration: ThreadAutoArchiveDuration
    """the thread will stop showing in the channel list after `auto_archive_duration` minutes of inactivity"""
    archive_timestamp: datetime
    """timestamp when the thread's archive status was last changed, used for calculating recent activity"""
    locked: bool
    """whether the thread is locked; when a thread is locked, only users with MANAGE_THREADS can unarchive it"""
    create_timestamp: datetime | None = None
    """timestamp when the thread was created; only populated for threads created after 2022-01-09"""


class PrivateThreadMetadata(ThreadMetadata):
    invitable: bool = False
    """whether non-moderators can add other non-moderators to the thread"""


class Channel(Base):
    # ? channels that carry a message cache
    textable: ClassVar[bool] = False

    id: Snowflake
    """the id of this channel"""
    type: ChannelType
    """the type of channel"""
    flags: ChannelFlag = ChannelFlag.NONE
    """channel flags combined as a bitfield"""

    _messages: Collection[Message] | None = PrivateAttr(default=None)

    @classmethod
    def from_raw(
        cls,
        data: dict,
        client: Client,
        **scope: Any  # noqa: ANN401
    ) -> Self:
        if cls is not Channel:
            return super().from_raw(data, client, **scope)

        try:
            channel_type = ChannelType(data['type'])
        except ValueError:
            logfire.warn(
                'unknown channel type {type} for channel {channel_id}',
                type=data['type'],
                channel_id=data.get('id')
            )
            return super().from_raw(data, client, **scope)

        return CHANNEL_TYPES[channel_type].from_raw(data, client, **scope)

    def _sync(self, data: dict) -> None:
        if self.textable and self._messages is None:
            self._messages = Collection(Message, self.client)

    @property
    def messages(self) -> Collection[Message] | None:
        """cached messages of this channel, `None` if the channel cannot hold messages"""
        return self._messages

    @property
    def mention(self) -> str:
        return f'<#{self.id}>'


class GuildChannel(Channel):
    guild_id: Snowflake | None = None
    """the id of the guild"""
    name: str | None = None
    """the name of the channel (1-100 characters)"""
    position: int = 0
    """sorting position of the channel"""
    parent_id: Snowflake | None = None
    """id of the parent category for a channel, for threads: id of the text channel this thread was created"""
    permission_overwrites: list[Overwrite] = []
    """explicit permission overwrites for members and roles"""
    nsfw: bool = False
    """whether the channel is nsfw"""

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

    @property
    def parent(self) -> Channel | None:
        if self.parent_id is None:
            return None

        return self.client.get_channel(self.parent_id)


class TextChannel(GuildChannel):
    textable: ClassVar[bool] = True

    topic: str | None = None
    rate_limit_per_user: int = 0
    last_message_id: Snowflake | None = None
    default_auto_archive_duration: ThreadAutoArchiveDuration | None = None


class AnnouncementChannel(TextChannel):
    ...


class VoiceChannel(GuildChannel):
    textable: ClassVar[bool] = True

    bitrate: int | None = None
    user_limit: int = 0
    rtc_region: str | None = None
    video_quality_mode: int | None = None
    rate_limit_per_user: int = 0
    last_message_id: Snowflake | None = None


class StageChannel(VoiceChannel):
    topic: str | None = None


class CategoryChannel(GuildChannel):
    ...


class ForumChannel(GuildChannel):
    topic: str | None = None
    # ? tags and emoji aren't used anywhere in the library, keep them raw
    available_tags: list[dict] = []
    default_reaction_emoji: dict | None = None
    default_thread_rate_limit_per_user: int = 0
    default_sort_order: int | None = None
    default_forum_layout: int = 0
    default_auto_archive_duration: ThreadAutoArchiveDuration | None = None


class ThreadChannel(GuildChannel):
    textable: ClassVar[bool] = True

    owner_id: Snowflake | None = None
    """id of the creator of the thread"""
    thread_metadata: ThreadMetadata
    """thread-specific fields not needed by other channels"""
    member_count: int = 0
    """an approximate count of users in a thread, stops counting at 50"""
    message_count: int = 0
    """number of messages (not including the initial message or deleted messages) in a thread"""
    total_message_sent: int = 0
    """number of messages ever sent in a thread"""
    rate_limit_per_user: int = 0
    last_message_id: Snowflake | None = None

    @property
    def owner(self) -> User | None:
        if self.owner_id is None:
            return None

        return self.client.users.get(self.owner_id)

    async def _edit(self, **options: Any) -> Self:  # noqa: ANN401
        channel = await self.client.rest.channels.edit(self.id, **options)
        assert isinstance(channel, type(self))
        return channel

    async def edit(
        self,
        *,
        archived: Optional[bool] = MISSING,
        auto_archive_duration: Optional[ThreadAutoArchiveDuration] = MISSING,
        flags: Optional[ChannelFlag] = MISSING,
        locked: Optional[bool] = MISSING,
        name: Optional[str] = MISSING,
        rate_limit_per_user: Optional[Nullable[int]] = MISSING,
        reason: str | None = None
    ) -> Self:
        return await self._edit(
            archived=archived,
            auto_archive_duration=auto_archive_duration,
            flags=flags,
            locked=locked,
            name=name,
            rate_limit_per_user=rate_limit_per_user,
            reason=reason
        )


class PublicThreadChannel(ThreadChannel):
    applied_tags: list[Snowflake] = []
    """the ids of the set of tags that have been applied to a thread in a forum or media channel"""

    async def edit(
        self,
        *,
        applied_tags: Optional[list[int]] = MISSING,
        archived: Optional[bool] = MISSING,
        auto_archive_duration: Optional[ThreadAutoArchiveDuration] = MISSING,
        flags: Optional[ChannelFlag] = MISSING,
        locked: Optional[bool] = MISSING,
        name: Optional[str] = MISSING,
        rate_limit_per_user: Optional[Nullable[int]] = MISSING,
        reason: str | None = None
    ) -> Self:
        return await self._edit(
            applied_tags=applied_tags,
            archived=archived,
            auto_archive_duration=auto_archive_duration,
            flags=flags,
            locked=locked,
            name=name,
            rate_limit_per_user=rate_limit_per_user,
            reason=reason
        )


class AnnouncementThreadChannel(ThreadChannel):
    ...


class PrivateThreadChannel(ThreadChannel):
    thread_metadata: PrivateThreadMetadata
    """thread-specific fields, including whether the thread is invitable"""

    async def edit(
        self,
        *,
        archived: Optional[bool] = MISSING,
        auto_archive_duration: Optional[ThreadAutoArchiveDuration] = MISSING,
        flags: Optional[ChannelFlag] = MISSING,
        invitable: Optional[bool] = MISSING,
        locked: Optional[bool] = MISSING,
        name: Optional[str] = MISSING,
        rate_limit_per_user: Optional[Nullable[int]] = MISSING,
        reason: str | None = None
    ) -> Self:
        """edit this thread

        `rate_limit_per_user` is the seconds between sending messages for
        users, between 0 and 21600. `reason` is shown in the audit log.
        """
        return await self._edit(
            archived=archived,
            auto_archive_duration=auto_archive_duration,
            flags=flags,
            invitable=invitable,
            locked=locked,
            name=name,
            rate_limit_per_user=rate_limit_per_user,
            reason=reason
        )


class PrivateChannel(Channel):
    textable: ClassVar[bool] = True

    recipients: list[User] = []
    """the recipients of the DM"""
    last_message_id: Snowflake | None = None

    @classmethod
    def _prepare(cls, data: dict, client: Client) -> dict:
        return {
            **data,
            'recipients': [
                recipient
                if isinstance(recipient, User) else
                client.users.update(recipient)
                for recipient in data.get('recipients', [])
            ]
        }

    @property
    def recipient(self) -> User | None:
        return self.recipients[0] if self.recipients else None


class GroupChannel(PrivateChannel):
    name: str | None = None
    icon: str | None = None
    owner_id: Snowflake | None = None
    application_id: Snowflake | None = None
    managed: bool = False


class InteractionResolvedChannel(Base):
    """a partial channel received in the resolved data of an interaction, never cached"""
    id: Snowflake
    type: ChannelType
    name: str | None = None
    permissions: Permission = Permission.NONE
    """computed permissions for the invoking user in the channel, including overwrites"""
    parent_id: Snowflake | None = None
    thread_metadata: ThreadMetadata | None = None

    @property
    def mention(self) -> str:
        return f'<#{self.id}>'

    @property
    def complete(self) -> Channel | None:
        """the full channel, if it is cached"""
        return self.client.get_channel(self.id)

    @property
    def parent(self) -> Channel | None:
        if self.parent_id is None:
            return None

        return self.client.get_channel(self.parent_id)


CHANNEL_TYPES: dict[ChannelType, type[Channel]] = {
    ChannelType.GUILD_TEXT: TextChannel,
    ChannelType.DM: PrivateChannel,
    ChannelType.GUILD_VOICE: VoiceChannel,
    ChannelType.GROUP_DM: GroupChannel,
    ChannelType.GUILD_CATEGORY: CategoryChannel,
    ChannelType.GUILD_ANNOUNCEMENT: AnnouncementChannel,
    ChannelType.ANNOUNCEMENT_THREAD: AnnouncementThreadChannel,
    ChannelType.PUBLIC_THREAD: PublicThreadChannel,
    ChannelType.PRIVATE_THREAD: PrivateThreadChannel,
    ChannelType.GUILD_STAGE_VOICE: StageChannel,
    ChannelType.GUILD_DIRECTORY: GuildChannel,
    ChannelType.GUILD_FORUM: ForumChannel,
    ChannelType.GUILD_MEDIA: ForumChannel,
}
