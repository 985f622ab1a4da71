"""application, sticker and voice region routes"""

import pytest

from cordite.enums import StickerFormatType
from cordite.models import Application, ClientApplication, Sticker, StickerPack, VoiceRegion

from tests import factories


STICKER_ID = 400000000000000001


def sticker(guild_id=None, **overrides):
    data = {
        'id': str(STICKER_ID),
        'name': 'wave',
        'description': 'hello there',
        'tags': 'wave',
        'type': 2 if guild_id is not None else 1,
        'format_type': 1,
        'available': True,
        **overrides
    }

    if guild_id is not None:
        data['guild_id'] = str(guild_id)
    else:
        data['pack_id'] = '500000000000000001'

    return data


def application():
    return {
        'id': str(factories.APPLICATION_ID),
        'name': 'cordite',
        'icon': None,
        'description': 'a bot',
        'bot_public': True,
        'bot_require_code_grant': False,
        'verify_key': 'abc',
        'flags': 8192,
        'bot': factories.user(id=factories.APPLICATION_ID, username='cordite', bot=True),
        'owner': factories.user()
    }


def last_route(client):
    call = client.rest.request.await_args
    return call.args[0], call.kwargs


class TestApplication:
    async def test_get_application(self, client):
        client.rest.request.return_value = application()

        app = await client.rest.misc.get_application()
        route, kwargs = last_route(client)

        assert isinstance(app, Application)
        assert app.name == 'cordite'
        assert app.owner is client.users.get(factories.USER_ID)
        assert (route.method, route.url) == ('GET', '/applications/@me')
        assert kwargs['auth'] is True

    async def test_get_client_application(self, client):
        client.rest.request.return_value = application()

        app = await client.rest.misc.get_client_application()

        assert type(app) is ClientApplication
        assert app.id == factories.APPLICATION_ID
        assert app.flags == 8192


class TestStickers:
    async def test_get_standard_sticker(self, client):
        client.rest.request.return_value = sticker()

        result = await client.rest.misc.get_sticker(STICKER_ID)
        route, _ = last_route(client)

        assert isinstance(result, Sticker)
        assert result.filename == 'wave.png'
        assert route.url == f'/stickers/{STICKER_ID}'

    async def test_guild_sticker_is_cached_in_cached_guild(self, guild_client):
        guild_client.rest.request.return_value = sticker(
            guild_id=factories.GUILD_ID,
            user=factories.user()
        )

        result = await guild_client.rest.misc.get_sticker(STICKER_ID)
        guild = guild_client.guilds.get(factories.GUILD_ID)

        assert guild.stickers.get(STICKER_ID) is result
        assert result.guild is guild
        assert result.user is guild_client.users.get(factories.USER_ID)

    async def test_guild_sticker_detached_without_guild(self, client):
        client.rest.request.return_value = sticker(guild_id=factories.GUILD_ID)

        result = await client.rest.misc.get_sticker(STICKER_ID)

        assert result.guild_id == factories.GUILD_ID
        assert result.guild is None

    async def test_get_sticker_packs(self, client):
        client.rest.request.return_value = {'sticker_packs': [{
            'id': '500000000000000001',
            'name': 'wumpus beyond',
            'sku_id': '600000000000000001',
            'cover_sticker_id': str(STICKER_ID),
            'description': 'say hello',
            'banner_asset_id': '700000000000000001',
            'stickers': [sticker(format_type=StickerFormatType.LOTTIE.value)]
        }]}

        [pack] = await client.rest.misc.get_sticker_packs()
        route, _ = last_route(client)

        assert isinstance(pack, StickerPack)
        assert pack.name == 'wumpus beyond'
        assert pack.stickers[0].format_type == StickerFormatType.LOTTIE
        assert route.url == '/sticker-packs'

    async def test_nitro_sticker_packs_is_deprecated(self, client):
        client.rest.request.return_value = {'sticker_packs': []}

        with pytest.warns(DeprecationWarning):
            packs = await client.rest.misc.get_nitro_sticker_packs()

        assert packs == []


class TestVoiceRegions:
    async def test_get_voice_regions(self, client):
        client.rest.request.return_value = [{
            'id': 'us-west',
            'name': 'US West',
            'optimal': True,
            'deprecated': False,
            'custom': False
        }]

        [region] = await client.rest.misc.get_voice_regions()
        route, _ = last_route(client)

        assert isinstance(region, VoiceRegion)
        assert region.optimal is True
        assert route.url == '/voice/regions'
