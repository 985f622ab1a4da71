from __future__ import annotations

from typing import Any


__all__ = (
    'AlreadyAcknowledged',
    'BadRequest',
    'BaseCorditeException',
    'Forbidden',
    'HTTPException',
    'InteractionError',
    'MalformedPayload',
    'NotFound',
    'ServerError',
    'Unauthorized',
    'UncachedError',
    'ValueNotResolved',
)


class BaseCorditeException(Exception):
    def __init__(self, *args, **kwargs) -> None:  # noqa: ANN002, ANN003
        super().__init__(*args, **kwargs)


class HTTPException(BaseCorditeException):
    status_code: int = 0

    def __init__(
        self,
        detail: Any | None = None,  # noqa: ANN401
        status_code: int | None = None
    ) -> None:
        self.detail = detail

        if status_code is not None:
            self.status_code = status_code

        super().__init__(detail)


class BadRequest(HTTPException):
    status_code: int = 400


class Unauthorized(HTTPException):
    status_code: int = 401


class Forbidden(HTTPException):
    status_code: int = 403


class NotFound(HTTPException):
    status_code: int = 404


class ServerError(HTTPException):
    status_code: int = 500


class MalformedPayload(BaseCorditeException, ValueError):
    """a required field was absent from data received from discord"""


class UncachedError(BaseCorditeException, LookupError):
    def __init__(
        self,
        entity: object,
        relation: str,
        cache: str,
        entity_id: int | None = None
    ) -> None:
        self.entity = entity
        self.relation = relation
        self.cache = cache
        self.entity_id = entity_id

        owner = type(entity).__name__
        owner_id = getattr(entity, 'id', None)

        super().__init__(
            f'{owner}({owner_id}).{relation}'
            + (f' ({entity_id})' if entity_id is not None else '')
            + f' is not present in the {cache} cache'
        )


class InteractionError(BaseCorditeException):
    ...


class AlreadyAcknowledged(InteractionError):
    def __init__(self, interaction_id: int | None = None) -> None:
        self.interaction_id = interaction_id
        super().__init__(
            'interactions cannot have more than one initial response'
        )


class ValueNotResolved(InteractionError, LookupError):
    def __init__(self, kind: str, value: str) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f'failed to resolve {kind} {value!r}')
