from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .models.base import Base
    from .client import Client


__all__ = (
    'Collection',
)


class Collection[T: Base](Mapping[int, T]):
    """a snowflake keyed store of cached entities

    the collection owns the canonical instance of every entity it holds,
    `update` mutates that instance in place so every holder of a reference
    sees the new state.
    """

    def __init__(
        self,
        base: type[T],
        client: Client,
        key: Callable[[dict], int] | None = None
    ) -> None:
        self.base = base
        self.client = client
        self._key = key or (lambda data: int(data['id']))
        self._items: dict[int, T] = {}

    def __getitem__(self, key: int) -> T:
        return self._items[int(key)]

    def __contains__(self, key: object) -> bool:
        try:
            return int(key) in self._items  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f'Collection[{self.base.__name__}]({len(self)})'

    def get(self, key: object, default: Any = None) -> T | None:  # noqa: ANN401
        try:
            return self._items.get(int(key), default)  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return default

    def add(self, entity: T) -> T:
        self._items[int(entity.id)] = entity  # type: ignore[attr-defined]
        return entity

    def update(
        self,
        data: dict,
        **scope: Any  # noqa: ANN401
    ) -> T:
        existing = self._items.get(self._key(data))

        if existing is not None:
            return existing.update(data)

        return self.add(self.base.from_raw(data, self.client, **scope))

    def remove(self, key: int) -> T | None:
        return self._items.pop(int(key), None)

    def clear(self) -> None:
        self._items.clear()

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        return next(
            (item for item in self._items.values() if predicate(item)),
            None
        )

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        return [
            item
            for item in self._items.values()
            if predicate(item)
        ]
