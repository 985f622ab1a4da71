from __future__ import annotations

import logfire

from .models.interaction import Interaction
from .models.channel import Channel, PrivateChannel
from .models.sticker import Sticker
from .models.message import Message
from .models.member import Member
from .models.guild import Guild
from .models.user import User
from .collection import Collection
from .rest import RESTManager
from .env import env


__all__ = (
    'Client',
)


class Client:
    """owns the entity caches and the rest manager

    every entity built by the library goes through here, so a user or member
    seen in two places is the same object in both.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        api_url: str | None = None
    ) -> None:
        self.rest = RESTManager(self, token or env.bot_token, api_url)

        self.users: Collection[User] = Collection(User, self)
        self.guilds: Collection[Guild] = Collection(Guild, self)
        # ? keyed on Channel so group dms dispatch to GroupChannel
        self.private_channels: Collection[PrivateChannel] = Collection(
            Channel, self)  # type: ignore[arg-type]

        self.channel_guild_map: dict[int, int] = {}
        self.thread_guild_map: dict[int, int] = {}

    def __repr__(self) -> str:
        return (
            f'Client(guilds={len(self.guilds)}, users={len(self.users)}, '
            f'private_channels={len(self.private_channels)})'
        )

    async def close(self) -> None:
        await self.rest.close()

    def get_channel(self, channel_id: int) -> Channel | None:
        channel_id = int(channel_id)

        if (guild_id := self.channel_guild_map.get(channel_id)) is not None:
            guild = self.guilds.get(guild_id)
            return guild.channels.get(channel_id) if guild is not None else None

        if (guild_id := self.thread_guild_map.get(channel_id)) is not None:
            guild = self.guilds.get(guild_id)
            return guild.threads.get(channel_id) if guild is not None else None

        return self.private_channels.get(channel_id)

    def update_member(
        self,
        guild_id: int | None,
        member_id: int,
        data: dict
    ) -> Member:
        guild = self.guilds.get(guild_id) if guild_id is not None else None

        if guild is not None:
            return guild.members.update(
                {**data, 'id': member_id}, guild_id=guild_id)

        return Member.from_raw(data, self, guild_id=guild_id)

    def update_channel(self, data: dict) -> Channel:
        guild_id = data.get('guild_id')
        guild = self.guilds.get(guild_id) if guild_id is not None else None

        if guild is None:
            if 'recipients' in data:
                return self.private_channels.update(data)

            existing = self.get_channel(data['id'])

            if existing is not None:
                return existing.update(data)

            return Channel.from_raw(data, self)

        channel_id = int(data['id'])

        # ? only threads carry thread_metadata
        if data.get('thread_metadata') is not None:
            self.thread_guild_map[channel_id] = guild.id
            return guild.threads.update(data, guild_id=guild.id)

        self.channel_guild_map[channel_id] = guild.id
        return guild.channels.update(data, guild_id=guild.id)

    def update_message(self, data: dict) -> Message:
        channel = self.get_channel(data['channel_id'])

        if channel is not None and channel.messages is not None:
            return channel.messages.update(data)

        return Message.from_raw(data, self)

    def convert_sticker(self, data: dict) -> Sticker:
        guild_id = data.get('guild_id')
        guild = self.guilds.get(guild_id) if guild_id is not None else None

        if guild is not None:
            return guild.stickers.update(data, guild_id=guild.id)

        return Sticker.from_raw(data, self)

    def handle_interaction(self, data: dict) -> Interaction:
        """build an interaction from an inbound payload, caching what it carries"""
        with logfire.span(
            'interaction {interaction_id}',
            interaction_id=data.get('id'),
            type=data.get('type')
        ):
            return Interaction.from_raw(data, self)

    def handle_guild_create(self, data: dict) -> Guild:
        logfire.debug(
            'caching guild {guild_id}',
            guild_id=data.get('id')
        )

        return self.guilds.update(data)

    def handle_guild_delete(self, guild_id: int) -> Guild | None:
        guild = self.guilds.remove(guild_id)

        if guild is None:
            return None

        for maps in (self.channel_guild_map, self.thread_guild_map):
            for channel_id in [
                channel_id
                for channel_id, owner_id in maps.items()
                if owner_id == guild.id
            ]:
                del maps[channel_id]

        return guild
