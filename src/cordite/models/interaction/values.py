from __future__ import annotations

from typing import TYPE_CHECKING

from cordite.errors import ValueNotResolved

from ..base import PydanticArbitraryType

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from ..channel import Channel, InteractionResolvedChannel
    from .data import ResolvedData
    from ..member import Member
    from ..role import Role
    from ..user import User


__all__ = (
    'SelectMenuValuesWrapper',
)


def _snowflake(value: str) -> int | None:
    return int(value) if value.isdecimal() else None


class SelectMenuValuesWrapper(PydanticArbitraryType):
    """the values a user picked in a select menu

    `raw` keeps the ids in the order they were selected, the `get_*` methods
    map them onto the entities sent alongside the interaction. ids that can't
    be resolved are skipped unless `ensure_present` is set.
    """

    def __init__(
        self,
        resolved: ResolvedData,
        values: Sequence[str]
    ) -> None:
        self.resolved = resolved
        self.raw: tuple[str, ...] = tuple(values)

    def __repr__(self) -> str:
        return f'SelectMenuValuesWrapper({list(self.raw)!r})'

    def __iter__(self) -> Iterator[str]:
        return iter(self.raw)

    def __len__(self) -> int:
        return len(self.raw)

    def _lookup[T](
        self,
        get: Callable[[int], T | None],
        kind: str,
        ensure_present: bool
    ) -> list[T]:
        found: list[T] = []

        for value in self.raw:
            key = _snowflake(value)
            entity = get(key) if key is not None else None

            if entity is not None:
                found.append(entity)
                continue

            if ensure_present:
                raise ValueNotResolved(kind, value)

        return found

    def get_strings(self) -> list[str]:
        return list(self.raw)

    def get_channels(
        self,
        ensure_present: bool = False
    ) -> list[InteractionResolvedChannel]:
        return self._lookup(
            self.resolved.channels.get, 'channel', ensure_present)

    def get_members(self, ensure_present: bool = False) -> list[Member]:
        return self._lookup(
            self.resolved.members.get, 'member', ensure_present)

    def get_roles(self, ensure_present: bool = False) -> list[Role]:
        return self._lookup(
            self.resolved.roles.get, 'role', ensure_present)

    def get_users(self, ensure_present: bool = False) -> list[User]:
        return self._lookup(
            self.resolved.users.get, 'user', ensure_present)

    def get_mentionables(
        self,
        ensure_present: bool = False
    ) -> list[Role | User]:
        return self._lookup(
            lambda key: (
                self.resolved.roles.get(key) or
                self.resolved.users.get(key)
            ),
            'mentionable',
            ensure_present
        )

    def get_complete_channels(
        self,
        ensure_present: bool = False
    ) -> list[Channel]:
        """the full channels from the client cache, rather than the resolved partials"""
        return self._lookup(
            self.resolved.client.get_channel, 'channel', ensure_present)
