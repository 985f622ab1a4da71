"""the single use initial response and the unlimited followups"""

from io import BytesIO

import pytest

from cordite import AlreadyAcknowledged, File, ServerError
from cordite.enums import InteractionCallbackType, MessageFlag
from cordite.models import ComponentInteraction, Message

from tests import factories


@pytest.fixture
def interaction(client):
    return ComponentInteraction.from_raw(
        factories.component_interaction(), client)


def sent_json(client, call: int = -1) -> dict:
    return client.rest.request.await_args_list[call].kwargs['json']


class TestInitialResponse:
    async def test_defer_twice(self, client, interaction):
        await interaction.defer()

        assert interaction.acknowledged is True
        assert client.rest.request.await_count == 1

        with pytest.raises(AlreadyAcknowledged):
            await interaction.defer()

        assert client.rest.request.await_count == 1

    async def test_defer_sends_flags(self, client, interaction):
        await interaction.defer(MessageFlag.EPHEMERAL)

        route = client.rest.request.await_args.args[0]

        assert route.method == 'POST'
        assert route.url == (
            f'/interactions/{factories.INTERACTION_ID}/interaction-token/callback')
        assert sent_json(client) == {
            'type': InteractionCallbackType.DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE.value,
            'data': {'flags': MessageFlag.EPHEMERAL}
        }

    async def test_defer_update(self, client, interaction):
        await interaction.defer_update()

        assert sent_json(client) == {
            'type': InteractionCallbackType.DEFERRED_UPDATE_MESSAGE.value
        }

    @pytest.mark.parametrize('first', [
        'create_message', 'create_modal', 'defer', 'defer_update', 'edit_parent'
    ])
    @pytest.mark.parametrize('second', [
        'create_message', 'create_modal', 'defer', 'defer_update', 'edit_parent'
    ])
    async def test_every_initial_response_is_single_use(
        self,
        client,
        interaction,
        first,
        second
    ):
        async def respond(name):
            if name == 'create_modal':
                return await interaction.create_modal('modal', 'title', [])
            return await getattr(interaction, name)()

        await respond(first)

        with pytest.raises(AlreadyAcknowledged):
            await respond(second)

        assert client.rest.request.await_count == 1

    async def test_acknowledged_before_transport_returns(self, client, interaction):
        seen = []

        async def request(*args, **kwargs):
            seen.append(interaction.acknowledged)

        client.rest.request.side_effect = request

        await interaction.defer()

        assert seen == [True]

    async def test_transport_failure_keeps_acknowledged(self, client, interaction):
        client.rest.request.side_effect = ServerError({'message': 'boom'})

        with pytest.raises(ServerError):
            await interaction.create_message('hello')

        assert interaction.acknowledged is True

        with pytest.raises(AlreadyAcknowledged):
            await interaction.create_message('hello again')

    async def test_create_message_payload(self, client, interaction):
        await interaction.create_message(
            'hello',
            flags=MessageFlag.EPHEMERAL,
            components=[{'type': 1, 'components': []}]
        )

        assert sent_json(client) == {
            'type': InteractionCallbackType.CHANNEL_MESSAGE_WITH_SOURCE.value,
            'data': {
                'content': 'hello',
                'flags': MessageFlag.EPHEMERAL.value,
                'components': [{'type': 1, 'components': []}]
            }
        }

    async def test_create_message_with_files_warns(self, client, interaction, warnings_log):
        file = File(BytesIO(b'data'), 'data.txt')

        await interaction.create_message('hello', attachments=[file])

        assert len(warnings_log) == 1
        assert client.rest.request.await_args.kwargs['files'] == [file]

    async def test_create_modal(self, client, interaction):
        await interaction.create_modal('feedback', 'tell us', [{'type': 1}])

        assert sent_json(client) == {
            'type': InteractionCallbackType.MODAL.value,
            'data': {
                'custom_id': 'feedback',
                'title': 'tell us',
                'components': [{'type': 1}]
            }
        }

    async def test_edit_parent(self, client, interaction):
        await interaction.edit_parent('edited')

        assert sent_json(client) == {
            'type': InteractionCallbackType.UPDATE_MESSAGE.value,
            'data': {'content': 'edited'}
        }


class TestFollowups:
    async def test_followups_ignore_acknowledgement(self, client, interaction):
        client.rest.request.return_value = factories.message(
            id=factories.MESSAGE_ID + 1, content='followup')

        await interaction.defer()

        for _ in range(3):
            message = await interaction.create_followup('followup')
            assert isinstance(message, Message)
            assert message.content == 'followup'

        assert client.rest.request.await_count == 4

    async def test_followups_before_acknowledgement(self, client, interaction):
        client.rest.request.return_value = factories.message()

        await interaction.create_followup('early')

        assert interaction.acknowledged is False

    async def test_followup_routes(self, client, interaction):
        client.rest.request.return_value = factories.message()
        base = f'/webhooks/{factories.APPLICATION_ID}/interaction-token'

        await interaction.create_followup('hi')
        await interaction.get_followup(factories.MESSAGE_ID)
        await interaction.edit_followup(factories.MESSAGE_ID, 'edited')
        await interaction.delete_followup(factories.MESSAGE_ID)
        await interaction.get_original()
        await interaction.edit_original('edited')
        await interaction.delete_original()

        routes = [
            (call.args[0].method, call.args[0].url)
            for call in client.rest.request.await_args_list
        ]

        assert routes == [
            ('POST', base),
            ('GET', f'{base}/messages/{factories.MESSAGE_ID}'),
            ('PATCH', f'{base}/messages/{factories.MESSAGE_ID}'),
            ('DELETE', f'{base}/messages/{factories.MESSAGE_ID}'),
            ('GET', f'{base}/messages/@original'),
            ('PATCH', f'{base}/messages/@original'),
            ('DELETE', f'{base}/messages/@original'),
        ]
        assert sent_json(client, 0) == {'content': 'hi'}
        assert sent_json(client, 2) == {'content': 'edited'}
        assert not interaction.acknowledged

    async def test_followup_message_is_cached_in_channel(self, guild_client):
        guild_client.rest.request.return_value = factories.message(
            id=factories.MESSAGE_ID + 1)
        interaction = ComponentInteraction.from_raw(
            factories.component_interaction(), guild_client)

        message = await interaction.create_followup('hi')
        channel = guild_client.get_channel(factories.CHANNEL_ID)

        assert channel.messages.get(factories.MESSAGE_ID + 1) is message
