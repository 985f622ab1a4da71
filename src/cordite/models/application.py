from __future__ import annotations

from typing import TYPE_CHECKING

from cordite.types import Snowflake

from .base import Base
from .user import User

if TYPE_CHECKING:
    from cordite.client import Client


__all__ = (
    'Application',
    'ClientApplication',
)


class ClientApplication(Base):
    """the bare application attached to the current bot"""
    id: Snowflake
    flags: int = 0  # ? i don't care enough to model this


class Application(ClientApplication):
    name: str
    icon: str | None = None
    description: str = ''
    rpc_origins: list[str] | None = None
    bot_public: bool = True
    bot_require_code_grant: bool = False
    bot: User | None = None
    terms_of_service_url: str | None = None
    privacy_policy_url: str | None = None
    owner: User | None = None
    verify_key: str = ''
    team: dict | None = None  # ? i don't care enough to model this
    guild_id: Snowflake | None = None
    primary_sku_id: Snowflake | None = None
    slug: str | None = None
    cover_image: str | None = None
    approximate_guild_count: int | None = None
    approximate_user_install_count: int | None = None
    redirect_uris: list[str] | None = None
    interactions_endpoint_url: str | None = None
    role_connections_verification_url: str | None = None
    tags: list[str] | None = None
    install_params: dict | None = None  # ? i don't care enough to model this
    custom_install_url: str | None = None

    @classmethod
    def _prepare(cls, data: dict, client: Client) -> dict:
        data = dict(data)

        for key in ('bot', 'owner'):
            if isinstance(user := data.get(key), dict):
                data[key] = client.users.update(user)

        return data
