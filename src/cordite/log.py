from __future__ import annotations

from typing import TYPE_CHECKING

import logfire

from .version import VERSION
from .env import env as default_env

if TYPE_CHECKING:
    from .env import Env


__all__ = (
    'configure_logfire',
)


def configure_logfire(
    env: Env = default_env,
    service_name: str = 'cordite'
) -> None:
    logfire.configure(
        service_name=service_name + ('-dev' if env.dev else ''),
        service_version=VERSION,
        token=env.logfire_token or None,
        send_to_logfire='if-token-present',
        environment='development' if env.dev else 'production',
        scrubbing=False if env.dev else None,
        console=False
    )

    # ? only worth the overhead when spans are actually exported
    if env.logfire_token:
        logfire.instrument_aiohttp_client()
