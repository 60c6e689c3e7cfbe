"""
Social API — Message SQLAlchemy Model
=======================================

What:  ORM model representing the `message` table.
Who:   Used by MessageStore for every message query.

Table Design:
    - message_id:        Integer primary key, assigned by the database
    - posted_by:         Author's account_id. No FOREIGN KEY: the business
                         layer only requires it to be positive.
    - message_text:      1-255 characters, enforced by MessageService
    - time_posted_epoch: Caller-supplied timestamp, stored verbatim (BIGINT so
                         epoch milliseconds fit)
"""

from sqlalchemy import BigInteger, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from social_api.database import Base


class Message(Base):
    """
    A text post authored by an account.

    Lifecycle:
        1. Created by POST /messages
        2. message_text replaced by PATCH /messages/{id}
        3. Row removed by DELETE /messages/{id} (hard delete)
    """

    __tablename__ = "message"

    message_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    posted_by: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )

    message_text: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    time_posted_epoch: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        default=0,
    )

    # GET /accounts/{id}/messages filters on posted_by
    __table_args__ = (
        Index("idx_message_posted_by", "posted_by"),
    )

    def __repr__(self) -> str:
        return (
            f"<Message(message_id={self.message_id}, posted_by={self.posted_by}, "
            f"time_posted_epoch={self.time_posted_epoch})>"
        )
