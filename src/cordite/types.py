from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic_core import CoreSchema, core_schema
from pydantic.json_schema import JsonSchemaValue
from pydantic import GetJsonSchemaHandler


__all__ = (
    'DISCORD_EPOCH',
    'Snowflake',
)


DISCORD_EPOCH = 1420070400000
"""milliseconds between the unix epoch and the first second of 2015"""


class Snowflake(int):
    """a discord id, an int in python and a string on the wire"""

    @classmethod
    def _validate(cls, value: Any) -> Snowflake:  # noqa: ANN401
        if isinstance(value, bool):
            raise ValueError('snowflakes cannot be booleans')

        if isinstance(value, str):
            if not value.isdecimal():
                raise ValueError(f'{value!r} is not a valid snowflake')
            value = int(value)

        if not isinstance(value, int) or value < 0:
            raise ValueError(f'{value!r} is not a valid snowflake')

        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,  # noqa: ANN401
        _handler: Any  # noqa: ANN401
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str,
                when_used='json'
            )
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {'type': 'string', 'pattern': r'^\d+$'}

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(
            ((self >> 22) + DISCORD_EPOCH) / 1000,
            tz=timezone.utc
        )
