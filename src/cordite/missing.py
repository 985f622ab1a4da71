from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, Self, TypeGuard


__all__ = (
    'MISSING',
    'Nullable',
    'Optional',
    '_MissingType',
    'drop_missing',
    'is_not_missing',
)


class _MissingType:
    """an option that was not passed at all, as opposed to an explicit `None`

    edit routes send `None` to clear a value and leave out anything `MISSING`.
    """
    _instance: _MissingType | None = None

    def __new__(cls) -> Self:
        if cls._instance is None:
            cls._instance = super().__new__(cls)

        return cls._instance  # type: ignore[return-value]

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return 'MISSING'

    def __reduce__(self) -> str:
        return 'MISSING'

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(
        self,
        _memo: Any  # noqa: ANN401
    ) -> Self:
        return self


MISSING = _MissingType()

type Optional[T] = T | _MissingType
type Nullable[T] = T | None


def is_not_missing[T](value: T | _MissingType) -> TypeGuard[T]:
    return value is not MISSING


def drop_missing[T](options: Mapping[str, T | _MissingType]) -> dict[str, T]:
    return {
        key: value
        for key, value in options.items()
        if is_not_missing(value)
    }
