from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import PrivateAttr
import logfire

from cordite.enums import (
    InteractionCallbackType,
    SELECT_MENU_TYPES,
    ComponentType,
    Permission
)
from cordite.errors import MalformedPayload, UncachedError
from cordite.missing import MISSING, _MissingType
from cordite.types import Snowflake

from .data import (
    UnknownComponentInteractionData,
    SelectMenuInteractionData,
    ComponentInteractionData,
    ButtonInteractionData,
    build_resolved
)
from ..channel import Channel, GuildChannel
from .values import SelectMenuValuesWrapper
from ..message import Message
from ..member import Member
from .base import Interaction
from ..guild import Guild
from ..user import User

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cordite.client import Client
    from cordite.http import File


__all__ = (
    'ComponentInteraction',
)


def _build_data(
    raw: dict,
    guild_id: int | None,
    client: Client
) -> ComponentInteractionData:
    try:
        component_type = ComponentType(raw['component_type'])
    except ValueError:
        component_type = None

    if component_type == ComponentType.BUTTON:
        return ButtonInteractionData(
            component_type=component_type,
            custom_id=raw['custom_id']
        )

    if component_type in SELECT_MENU_TYPES:
        resolved = build_resolved(raw.get('resolved'), guild_id, client)

        return SelectMenuInteractionData(
            component_type=component_type,
            custom_id=raw['custom_id'],
            resolved=resolved,
            values=SelectMenuValuesWrapper(resolved, raw.get('values', []))
        )

    logfire.warn(
        'unknown component type {component_type} on interaction data {custom_id}',
        component_type=raw['component_type'],
        custom_id=raw.get('custom_id')
    )

    return UnknownComponentInteractionData(**raw)


class ComponentInteraction(Interaction):
    """a user clicked a button or picked from a select menu"""
    app_permissions: Permission | None = None
    """the permissions the application has in the channel, only sent in guilds"""
    channel_id: Snowflake
    guild_id: Snowflake | None = None
    """`None` when the interaction did not come from a guild"""
    guild_locale: str | None = None
    guild_partial: dict | None = None
    """the partial guild sent with the interaction (id, locale and features)"""
    locale: str | None = None
    member: Member | None = None
    member_permissions: Permission | None = None
    message: Message | None = None
    """the message the component is attached to"""
    user: User
    """the user that invoked the interaction, `member.user` in guilds"""
    data: ComponentInteractionData

    # ? lazy relation slots, see channel and guild
    _channel: Channel | None = PrivateAttr(default=None)
    _guild: Guild | None | _MissingType = PrivateAttr(default=MISSING)

    @classmethod
    def _prepare(cls, data: dict, client: Client) -> dict:
        data = dict(data)

        if data.get('channel_id') is None:
            raise MalformedPayload(
                f'component interaction {data.get('id')} has no channel_id')

        # ? the wire format uses both a missing key and null for no guild
        guild_id = data['guild_id'] = data.get('guild_id')

        if 'guild' in data:
            data['guild_partial'] = data.pop('guild')

        # ? discord doesn't send guild_id on the message, and the message
        # ? can't find its channel without it
        message = data.get('message')
        if isinstance(message, dict):
            if guild_id is not None:
                message = {**message, 'guild_id': guild_id}

            data['message'] = client.update_message(message)

        member = data.get('member')
        if isinstance(member, dict):
            try:
                member_id = int(member['user']['id'])
            except KeyError as e:
                raise MalformedPayload(
                    'interaction member payload has no user') from e

            member = data['member'] = client.update_member(
                guild_id, member_id, member)

        if isinstance(member, Member):
            data['member_permissions'] = member.permissions

        match data.get('user'):
            case User():
                pass
            case dict() as user:
                data['user'] = client.users.update(user)
            case _ if isinstance(member, Member):
                data['user'] = member.user
            case _:
                raise MalformedPayload(
                    f'component interaction {data.get('id')} has neither a user nor a member')

        if isinstance(raw_data := data.get('data'), dict):
            data['data'] = _build_data(raw_data, guild_id, client)

        return data

    def _sync(self, data: dict) -> None:
        # ? new data invalidates whatever was resolved before
        self._channel = None
        self._guild = MISSING

    @property
    def channel(self) -> Channel | None:
        """the channel the interaction was sent from, `None` if it isn't cached"""
        if self._channel is None:
            self._channel = self.client.get_channel(self.channel_id)

        return self._channel

    @property
    def guild(self) -> Guild | None:
        """the guild the interaction was sent from

        `None` outside of guilds. raises `UncachedError` when the interaction
        came from a guild the client doesn't have cached.
        """
        if self._guild is MISSING:
            if self.guild_id is None:
                self._guild = None
                return None

            guild = self.client.guilds.get(self.guild_id)

            if guild is None:
                raise UncachedError(self, 'guild', 'guilds', self.guild_id)

            self._guild = guild

        return self._guild  # type: ignore[return-value]

    def in_cached_guild_channel(self) -> bool:
        return isinstance(self.channel, GuildChannel)

    def in_private_channel(self) -> bool:
        return self.guild_id is None

    def is_button_component_interaction(self) -> bool:
        return isinstance(self.data, ButtonInteractionData)

    def is_select_menu_component_interaction(self) -> bool:
        return isinstance(self.data, SelectMenuInteractionData)

    async def create_message(
        self,
        content: str | None = None,
        *,
        tts: bool = False,
        embeds: list[dict] | None = None,
        allowed_mentions: dict | None = None,
        flags: int | None = None,
        components: list[dict] | None = None,
        attachments: Sequence[File] | None = None
    ) -> None:
        """respond to the interaction with a message

        use `defer` and then `create_followup` to send files.
        """
        if attachments:
            logfire.warn(
                'files cannot be attached to an initial response to interaction {interaction_id}, '
                'defer the interaction then use create_followup',
                interaction_id=self.id
            )

        await self._respond(
            InteractionCallbackType.CHANNEL_MESSAGE_WITH_SOURCE,
            self.client.rest.interactions.message_payload(
                content,
                tts=tts,
                embeds=embeds,
                allowed_mentions=allowed_mentions,
                flags=flags,
                components=components,
                attachments=attachments
            ),
            files=attachments
        )

    async def create_modal(
        self,
        custom_id: str,
        title: str,
        components: list[dict]
    ) -> None:
        await self._respond(
            InteractionCallbackType.MODAL,
            {
                'custom_id': custom_id,
                'title': title,
                'components': components
            }
        )

    async def defer(self, flags: int | None = None) -> None:
        """acknowledge the interaction, the response will be sent as a followup"""
        await self._respond(
            InteractionCallbackType.DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE,
            {'flags': int(flags)} if flags is not None else None
        )

    async def defer_update(self, flags: int | None = None) -> None:
        """acknowledge the interaction, the source message will be edited later"""
        await self._respond(
            InteractionCallbackType.DEFERRED_UPDATE_MESSAGE,
            {'flags': int(flags)} if flags is not None else None
        )

    async def edit_parent(
        self,
        content: str | None = None,
        *,
        embeds: list[dict] | None = None,
        allowed_mentions: dict | None = None,
        flags: int | None = None,
        components: list[dict] | None = None,
        attachments: Sequence[File] | None = None
    ) -> None:
        """edit the message the component is attached to, use `edit_original` once acknowledged"""
        await self._respond(
            InteractionCallbackType.UPDATE_MESSAGE,
            self.client.rest.interactions.message_payload(
                content,
                embeds=embeds,
                allowed_mentions=allowed_mentions,
                flags=flags,
                components=components,
                attachments=attachments
            ),
            files=attachments
        )

    def to_json(self) -> dict:
        return {
            **super().to_json(),
            'app_permissions': (
                str(self.app_permissions.value)
                if self.app_permissions is not None
                else None
            ),
            'channel_id': str(self.channel_id),
            'data': self.data.to_json(),
            'guild_id': (
                str(self.guild_id)
                if self.guild_id is not None
                else None
            ),
            'guild_locale': self.guild_locale,
            'locale': self.locale,
            'member': (
                self.member.to_json()
                if self.member is not None
                else None
            ),
            'message': (
                self.message.to_json()
                if self.message is not None
                else None
            ),
            'user': self.user.to_json()
        }
