from typing import Self
from os import environ

from pydantic import BaseModel


__all__ = (
    'Env',
    'env',
)


class Env(BaseModel):
    bot_token: str
    api_url: str
    logfire_token: str
    dev: bool

    @classmethod
    def new(cls) -> Self:
        return cls.model_validate({
            'bot_token': environ.get('CORDITE_TOKEN', ''),
            'api_url': environ.get(
                'CORDITE_API_URL', 'https://discord.com/api/v10'),
            'logfire_token': environ.get('CORDITE_LOGFIRE_TOKEN', ''),
            'dev': environ.get('CORDITE_DEV', '0') != '0'
        })


env = Env.new()
