from __future__ import annotations

from typing import TYPE_CHECKING

from cordite.enums import InteractionCallbackType
from cordite.http import Route

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cordite.models.message import Message
    from cordite.http import File

    from .manager import RESTManager


__all__ = (
    'Interactions',
)


FOLLOWUP_PATH = '/webhooks/{application_id}/{interaction_token}'


class Interactions:
    def __init__(self, manager: RESTManager) -> None:
        self._manager = manager

    @staticmethod
    def message_payload(
        content: str | None = None,
        *,
        tts: bool = False,
        embeds: list[dict] | None = None,
        allowed_mentions: dict | None = None,
        flags: int | None = None,
        components: list[dict] | None = None,
        attachments: Sequence[File] | None = None
    ) -> dict:
        json: dict = {}

        if content is not None:
            json['content'] = content

        if tts:
            json['tts'] = tts

        if embeds is not None:
            json['embeds'] = embeds

        if allowed_mentions is not None:
            json['allowed_mentions'] = allowed_mentions

        if flags is not None:
            json['flags'] = int(flags)

        if components is not None:
            json['components'] = components

        if attachments:
            json['attachments'] = [
                attachment.as_payload_dict(index)
                for index, attachment in enumerate(attachments)
            ]

        return json

    async def create_interaction_response(
        self,
        interaction_id: int,
        interaction_token: str,
        type: InteractionCallbackType,
        data: dict | None = None,
        *,
        files: Sequence[File] | None = None
    ) -> None:
        json: dict = {'type': type.value}

        if data is not None:
            json['data'] = data

        await self._manager.request(
            Route(
                'POST',
                '/interactions/{interaction_id}/{interaction_token}/callback',
                interaction_id=interaction_id,
                interaction_token=interaction_token
            ),
            json=json,
            files=files
        )

    async def create_followup_message(
        self,
        application_id: int,
        interaction_token: str,
        content: str | None = None,
        *,
        tts: bool = False,
        embeds: list[dict] | None = None,
        allowed_mentions: dict | None = None,
        flags: int | None = None,
        components: list[dict] | None = None,
        attachments: Sequence[File] | None = None
    ) -> Message:
        return self._manager.client.update_message(
            await self._manager.request(
                Route(
                    'POST',
                    FOLLOWUP_PATH,
                    application_id=application_id,
                    interaction_token=interaction_token
                ),
                json=self.message_payload(
                    content,
                    tts=tts,
                    embeds=embeds,
                    allowed_mentions=allowed_mentions,
                    flags=flags,
                    components=components,
                    attachments=attachments
                ),
                files=attachments,
                params={'wait': 'true'}
            )
        )

    async def get_followup_message(
        self,
        application_id: int,
        interaction_token: str,
        message_id: int
    ) -> Message:
        return self._manager.client.update_message(
            await self._manager.request(
                Route(
                    'GET',
                    FOLLOWUP_PATH + '/messages/{message_id}',
                    application_id=application_id,
                    interaction_token=interaction_token,
                    message_id=message_id
                )
            )
        )

    async def edit_followup_message(
        self,
        application_id: int,
        interaction_token: str,
        message_id: int,
        content: str | None = None,
        *,
        embeds: list[dict] | None = None,
        allowed_mentions: dict | None = None,
        components: list[dict] | None = None,
        attachments: Sequence[File] | None = None
    ) -> Message:
        return self._manager.client.update_message(
            await self._manager.request(
                Route(
                    'PATCH',
                    FOLLOWUP_PATH + '/messages/{message_id}',
                    application_id=application_id,
                    interaction_token=interaction_token,
                    message_id=message_id
                ),
                json=self.message_payload(
                    content,
                    embeds=embeds,
                    allowed_mentions=allowed_mentions,
                    components=components,
                    attachments=attachments
                ),
                files=attachments
            )
        )

    async def delete_followup_message(
        self,
        application_id: int,
        interaction_token: str,
        message_id: int
    ) -> None:
        await self._manager.request(
            Route(
                'DELETE',
                FOLLOWUP_PATH + '/messages/{message_id}',
                application_id=application_id,
                interaction_token=interaction_token,
                message_id=message_id
            )
        )

    # ? @original can't go through the route params, they get quoted

    async def get_original_message(
        self,
        application_id: int,
        interaction_token: str
    ) -> Message:
        return self._manager.client.update_message(
            await self._manager.request(
                Route(
                    'GET',
                    FOLLOWUP_PATH + '/messages/@original',
                    application_id=application_id,
                    interaction_token=interaction_token
                )
            )
        )

    async def edit_original_message(
        self,
        application_id: int,
        interaction_token: str,
        content: str | None = None,
        *,
        embeds: list[dict] | None = None,
        allowed_mentions: dict | None = None,
        components: list[dict] | None = None,
        attachments: Sequence[File] | None = None
    ) -> Message:
        return self._manager.client.update_message(
            await self._manager.request(
                Route(
                    'PATCH',
                    FOLLOWUP_PATH + '/messages/@original',
                    application_id=application_id,
                    interaction_token=interaction_token
                ),
                json=self.message_payload(
                    content,
                    embeds=embeds,
                    allowed_mentions=allowed_mentions,
                    components=components,
                    attachments=attachments
                ),
                files=attachments
            )
        )

    async def delete_original_message(
        self,
        application_id: int,
        interaction_token: str
    ) -> None:
        await self._manager.request(
            Route(
                'DELETE',
                FOLLOWUP_PATH + '/messages/@original',
                application_id=application_id,
                interaction_token=interaction_token
            )
        )
