from __future__ import annotations

from typing import Any, Self, TYPE_CHECKING

from pydantic import Field, PrivateAttr
import logfire

from cordite.enums import InteractionType, InteractionCallbackType
from cordite.errors import AlreadyAcknowledged
from cordite.types import Snowflake

from ..base import Base

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cordite.client import Client
    from cordite.http import File

    from ..message import Message


__all__ = (
    'Interaction',
)


class Interaction(Base):
    id: Snowflake
    """id of the interaction"""
    application_id: Snowflake
    """id of the application this interaction is for"""
    type: InteractionType
    """type of interaction"""
    token: str | None = Field(default=None, exclude=True, repr=False)
    """continuation token for responding to the interaction, never serialized"""
    version: int = 1
    """read-only property, always `1`"""

    _acknowledged: bool = PrivateAttr(default=False)

    @classmethod
    def from_raw(
        cls,
        data: dict,
        client: Client,
        **scope: Any  # noqa: ANN401
    ) -> Self:
        if cls is not Interaction:
            return super().from_raw(data, client, **scope)

        if data.get('type') == InteractionType.MESSAGE_COMPONENT.value:
            from .component import ComponentInteraction
            return ComponentInteraction.from_raw(  # type: ignore[return-value]
                data, client, **scope)

        logfire.warn(
            'unhandled interaction type {type} for interaction {interaction_id}',
            type=data.get('type'),
            interaction_id=data.get('id')
        )

        return super().from_raw(data, client, **scope)

    @property
    def acknowledged(self) -> bool:
        """whether an initial response was sent, once set this never goes back"""
        return self._acknowledged

    def _acknowledge(self) -> None:
        # ? must happen before anything is awaited, a second call racing
        # ? in behind the first would otherwise get past the check
        if self._acknowledged:
            raise AlreadyAcknowledged(self.id)

        self._acknowledged = True

    async def _respond(
        self,
        type: InteractionCallbackType,
        data: dict | None = None,
        files: Sequence[File] | None = None
    ) -> None:
        token = self._token
        self._acknowledge()

        await self.client.rest.interactions.create_interaction_response(
            self.id,
            token,
            type,
            data,
            files=files
        )

    @property
    def _token(self) -> str:
        if self.token is None:
            raise ValueError(
                f'interaction {self.id} has no token, it cannot be responded to')

        return self.token

    # ? followups are unlimited, they never touch the acknowledged flag

    async def create_followup(
        self,
        content: str | None = None,
        *,
        tts: bool = False,
        embeds: list[dict] | None = None,
        allowed_mentions: dict | None = None,
        flags: int | None = None,
        components: list[dict] | None = None,
        attachments: Sequence[File] | None = None
    ) -> Message:
        return await self.client.rest.interactions.create_followup_message(
            self.application_id,
            self._token,
            content,
            tts=tts,
            embeds=embeds,
            allowed_mentions=allowed_mentions,
            flags=flags,
            components=components,
            attachments=attachments
        )

    async def get_followup(self, message_id: int) -> Message:
        return await self.client.rest.interactions.get_followup_message(
            self.application_id, self._token, message_id)

    async def edit_followup(
        self,
        message_id: int,
        content: str | None = None,
        *,
        embeds: list[dict] | None = None,
        allowed_mentions: dict | None = None,
        components: list[dict] | None = None,
        attachments: Sequence[File] | None = None
    ) -> Message:
        return await self.client.rest.interactions.edit_followup_message(
            self.application_id,
            self._token,
            message_id,
            content,
            embeds=embeds,
            allowed_mentions=allowed_mentions,
            components=components,
            attachments=attachments
        )

    async def delete_followup(self, message_id: int) -> None:
        await self.client.rest.interactions.delete_followup_message(
            self.application_id, self._token, message_id)

    async def get_original(self) -> Message:
        return await self.client.rest.interactions.get_original_message(
            self.application_id, self._token)

    async def edit_original(
        self,
        content: str | None = None,
        *,
        embeds: list[dict] | None = None,
        allowed_mentions: dict | None = None,
        components: list[dict] | None = None,
        attachments: Sequence[File] | None = None
    ) -> Message:
        return await self.client.rest.interactions.edit_original_message(
            self.application_id,
            self._token,
            content,
            embeds=embeds,
            allowed_mentions=allowed_mentions,
            components=components,
            attachments=attachments
        )

    async def delete_original(self) -> None:
        await self.client.rest.interactions.delete_original_message(
            self.application_id, self._token)

    def to_json(self) -> dict:
        return {
            'id': str(self.id),
            'application_id': str(self.application_id),
            'type': self.type.value,
            'version': self.version
        }
