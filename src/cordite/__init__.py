from .errors import (
    BaseCorditeException,
    AlreadyAcknowledged,
    MalformedPayload,
    InteractionError,
    ValueNotResolved,
    UncachedError,
    HTTPException,
    Unauthorized,
    ServerError,
    BadRequest,
    Forbidden,
    NotFound
)
from .missing import MISSING, is_not_missing
from .log import configure_logfire
from .collection import Collection
from .rest import RESTManager
from .http import File, Route
from .version import VERSION
from .client import Client
from .env import Env, env


__all__ = (
    'MISSING',
    'VERSION',
    'AlreadyAcknowledged',
    'BadRequest',
    'BaseCorditeException',
    'Client',
    'Collection',
    'Env',
    'File',
    'Forbidden',
    'HTTPException',
    'InteractionError',
    'MalformedPayload',
    'NotFound',
    'RESTManager',
    'Route',
    'ServerError',
    'Unauthorized',
    'UncachedError',
    'ValueNotResolved',
    'configure_logfire',
    'env',
    'is_not_missing',
)
