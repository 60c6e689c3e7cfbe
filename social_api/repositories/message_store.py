"""
Social API — Message Store
============================

What:  Parameterized statements against the `message` table.
Who:   Called by MessageService only.

Query plan:
    list_all         SELECT * FROM message                         (no ORDER BY)
    get_by_id        SELECT * FROM message WHERE message_id = :id  (primary key)
    insert           INSERT INTO message (posted_by, message_text, time_posted_epoch)
    update_text      UPDATE message SET message_text = :t WHERE message_id = :id,
                     then get_by_id to re-read the persisted row
    delete_by_id     DELETE FROM message WHERE message_id = :id
    list_by_account  SELECT * FROM message WHERE posted_by = :account_id
                     (idx_message_posted_by)

Ordering:
    list_all and list_by_account return rows in whatever order the database
    produces. Callers must not assume sorted output.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from social_api.models.message import Message
from social_api.repositories.base import Store

logger = logging.getLogger(__name__)


class MessageStore(Store):
    table = "message"

    async def list_all(self, db: AsyncSession) -> List[Message]:
        try:
            result = await db.execute(select(Message))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise await self._database_error(db, "list_all", e)

    async def get_by_id(self, db: AsyncSession, message_id: int) -> Optional[Message]:
        # populate_existing: refresh any instance already in the session's
        # identity map so the caller always sees the persisted row
        try:
            result = await db.execute(
                select(Message)
                .where(Message.message_id == message_id)
                .execution_options(populate_existing=True)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise await self._database_error(db, "get_by_id", e)

    async def insert(
        self,
        db: AsyncSession,
        posted_by: int,
        message_text: str,
        time_posted_epoch: int,
    ) -> Message:
        message = Message(
            posted_by=posted_by,
            message_text=message_text,
            time_posted_epoch=time_posted_epoch,
        )
        try:
            db.add(message)
            await db.flush()  # Emits the INSERT and assigns message_id
        except SQLAlchemyError as e:
            raise await self._database_error(db, "insert", e)

        logger.info(
            "Message created: message_id=%d posted_by=%d",
            message.message_id,
            message.posted_by,
        )
        return message

    async def update_text(
        self, db: AsyncSession, message_id: int, message_text: str
    ) -> Optional[Message]:
        """
        Replace a message's text and return the row as re-read from the database.

        Returns None when the UPDATE touched no row (the message vanished
        between the caller's existence check and this statement).
        """
        try:
            result = await db.execute(
                update(Message)
                .where(Message.message_id == message_id)
                .values(message_text=message_text)
                .execution_options(synchronize_session=False)
            )
        except SQLAlchemyError as e:
            raise await self._database_error(db, "update_text", e)

        if result.rowcount == 0:
            return None
        return await self.get_by_id(db, message_id)

    async def delete_by_id(self, db: AsyncSession, message_id: int) -> int:
        """Delete one message. Returns the number of rows removed (0 or 1)."""
        try:
            result = await db.execute(
                delete(Message)
                .where(Message.message_id == message_id)
                .execution_options(synchronize_session=False)
            )
        except SQLAlchemyError as e:
            raise await self._database_error(db, "delete_by_id", e)

        logger.info("Message deleted: message_id=%d rows=%d", message_id, result.rowcount)
        return result.rowcount

    async def list_by_account(self, db: AsyncSession, account_id: int) -> List[Message]:
        try:
            result = await db.execute(
                select(Message).where(Message.posted_by == account_id)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise await self._database_error(db, "list_by_account", e)


message_store = MessageStore()
