from __future__ import annotations

from typing import TYPE_CHECKING

import logfire

from cordite.collection import Collection
from cordite.enums import ComponentType

from ..channel import InteractionResolvedChannel
from ..base import PydanticArbitraryType, RawBaseModel
from .values import SelectMenuValuesWrapper
from ..member import Member
from ..role import Role
from ..user import User

if TYPE_CHECKING:
    from cordite.client import Client


__all__ = (
    'ButtonInteractionData',
    'ComponentInteractionData',
    'ResolvedData',
    'SelectMenuInteractionData',
    'UnknownComponentInteractionData',
    'build_resolved',
)


class ResolvedData(PydanticArbitraryType):
    """the entities referenced by a select menu interaction

    members, roles and users are the same instances held by the client cache
    where the cache could take them, channels are always fresh partials.
    """

    def __init__(self, client: Client) -> None:
        self.client = client
        self.channels: Collection[InteractionResolvedChannel] = Collection(
            InteractionResolvedChannel, client)
        self.members: Collection[Member] = Collection(Member, client)
        self.roles: Collection[Role] = Collection(Role, client)
        self.users: Collection[User] = Collection(User, client)

    def __repr__(self) -> str:
        return (
            f'ResolvedData(channels={len(self.channels)}, '
            f'members={len(self.members)}, roles={len(self.roles)}, '
            f'users={len(self.users)})'
        )

    def to_json(self) -> dict:
        # ? members are sent without their user, it lives in the users map
        return {
            'channels': {
                str(id): channel.to_json()
                for id, channel in self.channels.items()
            },
            'members': {
                str(id): {
                    key: value
                    for key, value in member.to_json().items()
                    if key != 'user'
                }
                for id, member in self.members.items()
            },
            'roles': {
                str(id): role.to_json()
                for id, role in self.roles.items()
            },
            'users': {
                str(id): user.to_json()
                for id, user in self.users.items()
            }
        }


def _resolve_role(
    raw: dict,
    guild_id: int | None,
    client: Client
) -> Role:
    guild = client.guilds.get(guild_id) if guild_id is not None else None

    if guild is not None:
        try:
            return guild.roles.update(raw, guild_id=guild_id)
        except Exception as e:  # noqa: BLE001
            logfire.debug(
                'failed to cache resolved role {role_id}, using a detached role',
                role_id=raw.get('id'),
                error=str(e)
            )

    return Role.from_raw(raw, client, guild_id=guild_id)


def build_resolved(
    raw: dict | None,
    guild_id: int | None,
    client: Client
) -> ResolvedData:
    """populate the entities of an interaction's `resolved` object

    members are merged with their companion entry in `users` before going
    through the cache, roles fall back to a detached instance whenever the
    guild's role cache can't take them.
    """
    resolved = ResolvedData(client)

    if not raw:
        return resolved

    for channel in (raw.get('channels') or {}).values():
        resolved.channels.add(
            InteractionResolvedChannel.from_raw(channel, client))

    users = raw.get('users') or {}

    for member_id, member in (raw.get('members') or {}).items():
        user = users.get(member_id)

        if user is None:
            logfire.warn(
                'resolved member {member_id} has no companion user, skipping',
                member_id=member_id
            )
            continue

        resolved.members.add(client.update_member(
            guild_id,
            int(member_id),
            {**member, 'user': user}
        ))

    for role in (raw.get('roles') or {}).values():
        resolved.roles.add(_resolve_role(role, guild_id, client))

    for user in users.values():
        resolved.users.add(client.users.update(user))

    return resolved


class ButtonInteractionData(RawBaseModel):
    component_type: ComponentType = ComponentType.BUTTON
    custom_id: str
    """the developer-defined identifier of the button"""


class SelectMenuInteractionData(RawBaseModel):
    component_type: ComponentType
    custom_id: str
    """the developer-defined identifier of the select menu"""
    resolved: ResolvedData
    values: SelectMenuValuesWrapper

    def to_json(self) -> dict:
        return {
            'component_type': self.component_type.value,
            'custom_id': self.custom_id,
            'values': list(self.values.raw),
            'resolved': self.resolved.to_json()
        }


class UnknownComponentInteractionData(RawBaseModel):
    """data of a component type this library doesn't know about, kept raw"""
    component_type: int
    custom_id: str = ''


type ComponentInteractionData = (
    ButtonInteractionData |
    SelectMenuInteractionData |
    UnknownComponentInteractionData
)
