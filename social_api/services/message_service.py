"""
Social API — Message Service (Business Rules)
===============================================

What:  Validation and orchestration for message CRUD.
How:   Applies the text and author rules, then delegates to MessageStore.
Who:   Called by the /messages and /accounts/{id}/messages route handlers.

Text rules (identical on create and update):
    - present and not blank (whitespace-only counts as blank)
    - at most MESSAGE_MAX_LENGTH characters

Author rule (create only):
    - posted_by present and > 0. The account is NOT looked up; a message may
      reference an account_id that does not exist.

Two-step operations:
    delete_by_id  read, then delete; returns the snapshot taken before deletion
    update_text   existence check, UPDATE, then re-read from storage
    Both run inside the request's transaction but are not a single statement.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from social_api.exceptions import NotFoundError, ValidationError
from social_api.repositories.message_store import MessageStore, message_store
from social_api.schemas.message import MessageCreate, MessageResponse

logger = logging.getLogger(__name__)

MESSAGE_MAX_LENGTH = 255


def validate_message_text(message_text: Optional[str]) -> str:
    """Apply the shared text rules; returns the text unchanged when valid."""
    if message_text is None or not message_text.strip():
        raise ValidationError(message="Message text must not be blank", field="message_text")
    if len(message_text) > MESSAGE_MAX_LENGTH:
        raise ValidationError(
            message=f"Message text must be at most {MESSAGE_MAX_LENGTH} characters",
            field="message_text",
            context={"length": len(message_text)},
        )
    return message_text


class MessageService:
    """
    Business logic for messages.

    Stateless apart from the injected store; one instance serves all requests.
    """

    def __init__(self, store: Optional[MessageStore] = None):
        self.store = store or message_store

    async def create(self, db: AsyncSession, candidate: MessageCreate) -> MessageResponse:
        """
        Validate and persist a new message.

        Raises:
            ValidationError: blank/over-long text, or posted_by missing or <= 0
            DatabaseError: storage failure
        """
        message_text = validate_message_text(candidate.message_text)

        if candidate.posted_by is None or candidate.posted_by <= 0:
            raise ValidationError(message="posted_by must be a positive account id", field="posted_by")

        message = await self.store.insert(
            db,
            posted_by=candidate.posted_by,
            message_text=message_text,
            time_posted_epoch=candidate.time_posted_epoch or 0,
        )
        return MessageResponse.model_validate(message)

    async def get_all(self, db: AsyncSession) -> List[MessageResponse]:
        messages = await self.store.list_all(db)
        return [MessageResponse.model_validate(m) for m in messages]

    async def get_by_id(self, db: AsyncSession, message_id: int) -> MessageResponse:
        message = await self.store.get_by_id(db, message_id)
        if message is None:
            raise NotFoundError(resource="message", resource_id=message_id)
        return MessageResponse.model_validate(message)

    async def delete_by_id(self, db: AsyncSession, message_id: int) -> MessageResponse:
        """
        Delete a message and return what it looked like before deletion.

        Raises:
            NotFoundError: no message with this id (nothing is deleted)
            DatabaseError: storage failure
        """
        message = await self.store.get_by_id(db, message_id)
        if message is None:
            raise NotFoundError(resource="message", resource_id=message_id)

        snapshot = MessageResponse.model_validate(message)
        await self.store.delete_by_id(db, message_id)
        return snapshot

    async def update_text(
        self, db: AsyncSession, message_id: int, new_text: Optional[str]
    ) -> MessageResponse:
        """
        Replace a message's text.

        Returns:
            The message as re-read from storage after the UPDATE.

        Raises:
            ValidationError: blank or over-long text (checked before any query)
            NotFoundError: no message with this id
            DatabaseError: storage failure
        """
        message_text = validate_message_text(new_text)

        if await self.store.get_by_id(db, message_id) is None:
            raise NotFoundError(resource="message", resource_id=message_id)

        updated = await self.store.update_text(db, message_id, message_text)
        if updated is None:
            # Deleted between the existence check and the UPDATE
            raise NotFoundError(resource="message", resource_id=message_id)
        return MessageResponse.model_validate(updated)

    async def get_by_account(self, db: AsyncSession, account_id: int) -> List[MessageResponse]:
        """All messages posted by account_id; an empty list when there are none."""
        messages = await self.store.list_by_account(db, account_id)
        return [MessageResponse.model_validate(m) for m in messages]


message_service = MessageService()
