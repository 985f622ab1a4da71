"""building the resolved entities of select menu interactions"""

import pytest

from cordite.models import InteractionResolvedChannel, Role, build_resolved
from cordite.enums import Permission

from tests import factories


def resolved_roles(count: int) -> dict:
    return {
        'roles': {
            str(factories.ROLE_ID + index): factories.role(
                id=factories.ROLE_ID + index, name=f'role {index}')
            for index in range(count)
        }
    }


class TestRoles:
    @pytest.mark.parametrize('count', [0, 1, 3])
    def test_uncached_guild_gives_detached_roles(self, client, count):
        resolved = build_resolved(
            resolved_roles(count), factories.GUILD_ID, client)

        assert len(resolved.roles) == count
        for role in resolved.roles.values():
            assert isinstance(role, Role)
            assert role.guild_id == factories.GUILD_ID

        assert client.guilds.get(factories.GUILD_ID) is None

    @pytest.mark.parametrize('count', [1, 3])
    def test_cached_guild_gives_cache_backed_roles(self, guild_client, count):
        resolved = build_resolved(
            resolved_roles(count), factories.GUILD_ID, guild_client)
        guild = guild_client.guilds.get(factories.GUILD_ID)

        assert len(resolved.roles) == count
        for role_id, role in resolved.roles.items():
            cached = guild.roles.get(role_id)
            assert cached is role
            assert cached.model_dump() == role.model_dump()

    def test_existing_cached_role_is_updated_in_place(self, guild_client):
        guild = guild_client.guilds.get(factories.GUILD_ID)
        original = guild.roles.get(factories.ROLE_ID)

        resolved = build_resolved(
            {'roles': {str(factories.ROLE_ID): factories.role(name='renamed')}},
            factories.GUILD_ID,
            guild_client
        )

        assert resolved.roles.get(factories.ROLE_ID) is original
        assert original.name == 'renamed'

    def test_failing_cache_update_falls_back_to_detached(self, guild_client, monkeypatch):
        guild = guild_client.guilds.get(factories.GUILD_ID)

        def broken_update(data, **scope):
            raise RuntimeError('cache is broken')

        monkeypatch.setattr(guild.roles, 'update', broken_update)

        resolved = build_resolved(
            resolved_roles(2), factories.GUILD_ID, guild_client)

        assert len(resolved.roles) == 2
        for role in resolved.roles.values():
            assert role.guild_id == factories.GUILD_ID


class TestMembers:
    def test_member_is_merged_with_companion_user(self, client):
        companion = factories.user(
            username='companion', global_name='Companion')

        resolved = build_resolved(
            {
                'members': {str(factories.USER_ID): factories.member(
                    nick='nick', permissions='2048')},
                'users': {str(factories.USER_ID): companion}
            },
            factories.GUILD_ID,
            client
        )

        member = resolved.members.get(factories.USER_ID)

        assert member.username == companion['username']
        assert member.user.global_name == companion['global_name']
        assert member.user.id == factories.USER_ID
        assert member.permissions == Permission.SEND_MESSAGES
        assert member.user is resolved.users.get(factories.USER_ID)
        assert member.user is client.users.get(factories.USER_ID)

    def test_member_goes_into_cached_guild(self, guild_client):
        resolved = build_resolved(
            {
                'members': {str(factories.USER_ID): factories.member()},
                'users': {str(factories.USER_ID): factories.user()}
            },
            factories.GUILD_ID,
            guild_client
        )

        guild = guild_client.guilds.get(factories.GUILD_ID)

        assert guild.members.get(factories.USER_ID) is resolved.members.get(factories.USER_ID)

    def test_member_without_companion_user_is_skipped(self, client, warnings_log):
        resolved = build_resolved(
            {'members': {str(factories.USER_ID): factories.member()}},
            factories.GUILD_ID,
            client
        )

        assert len(resolved.members) == 0
        assert len(warnings_log) == 1
        assert warnings_log[0][1]['member_id'] == str(factories.USER_ID)


class TestChannelsAndUsers:
    def test_channels_are_never_cached(self, client):
        resolved = build_resolved(
            {'channels': {str(factories.CHANNEL_ID): {
                'id': str(factories.CHANNEL_ID),
                'type': 0,
                'name': 'general',
                'permissions': '1024'
            }}},
            factories.GUILD_ID,
            client
        )

        channel = resolved.channels.get(factories.CHANNEL_ID)

        assert isinstance(channel, InteractionResolvedChannel)
        assert channel.permissions == Permission.VIEW_CHANNEL
        assert channel.complete is None
        assert client.get_channel(factories.CHANNEL_ID) is None

    def test_users_are_cached(self, client):
        resolved = build_resolved(
            {'users': {str(factories.USER_ID): factories.user()}},
            None,
            client
        )

        assert resolved.users.get(factories.USER_ID) is client.users.get(factories.USER_ID)

    def test_empty_or_missing_resolved(self, client):
        for raw in (None, {}):
            resolved = build_resolved(raw, None, client)

            assert len(resolved.channels) == 0
            assert len(resolved.members) == 0
            assert len(resolved.roles) == 0
            assert len(resolved.users) == 0
