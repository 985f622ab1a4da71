from __future__ import annotations

from typing import Any, Self, TYPE_CHECKING

from pydantic_core.core_schema import CoreSchema, any_schema
from pydantic.json_schema import JsonSchemaValue
from pydantic import BaseModel, PrivateAttr

if TYPE_CHECKING:
    from cordite.client import Client


__all__ = (
    'Base',
    'PydanticArbitraryType',
    'RawBaseModel',
)


class RawBaseModel(BaseModel):
    _raw_data: dict = PrivateAttr(default_factory=dict)

    def __init__(self, **data) -> None:  # noqa: ANN003
        super().__init__(**data)
        self._raw_data = data.copy()

    @property
    def _raw(self) -> dict:
        return self._raw_data

    def to_json(self) -> dict:
        return self.model_dump(mode='json')


class Base(RawBaseModel):
    """an entity bound to a client, updated in place when new data arrives"""
    _client: Client | None = PrivateAttr(default=None)

    @property
    def client(self) -> Client:
        if self._client is None:
            raise RuntimeError(
                f'{type(self).__name__} is not bound to a client')

        return self._client

    @classmethod
    def _prepare(cls, data: dict, client: Client) -> dict:
        """resolve nested entities through the client cache before validation"""
        return data

    def _sync(self, data: dict) -> None:
        """called with the incoming payload after construction and every update"""

    @classmethod
    def from_raw(
        cls,
        data: dict,
        client: Client,
        **scope: Any  # noqa: ANN401
    ) -> Self:
        payload = {**data, **scope}

        self = cls(**cls._prepare(payload, client))
        self._client = client
        self._sync(payload)

        return self

    def update(self, data: dict) -> Self:
        cls = type(self)

        fresh = cls(**cls._prepare({**self._raw, **data}, self.client))

        for name in cls.model_fields:
            setattr(self, name, getattr(fresh, name))

        self._raw_data = fresh._raw
        self._sync(data)

        return self


class PydanticArbitraryType:
    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: None,
        _handler: None
    ) -> CoreSchema:
        return any_schema()

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: None
    ) -> JsonSchemaValue:
        return {'type': 'any'}
