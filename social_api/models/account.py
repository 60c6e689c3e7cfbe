"""
Social API — Account SQLAlchemy Model
=======================================

What:  ORM model representing the `account` table.
How:   Inherits from the shared DeclarativeBase; Alembic revision 001 mirrors it.
Who:   Used by AccountStore for registration and login queries.

Table Design:
    - account_id: Integer primary key, assigned by the database on insert
    - username:   UNIQUE; the registration rule checks it first, the constraint
                  catches a concurrent duplicate that slips past that check
    - password:   Stored as supplied (plaintext comparison on login)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from social_api.database import Base


class Account(Base):
    """
    A registered user.

    Lifecycle:
        Created by POST /register; never updated or deleted; read by POST /login.
    """

    __tablename__ = "account"

    account_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    username: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    def __repr__(self) -> str:
        # Password deliberately omitted
        return f"<Account(account_id={self.account_id}, username='{self.username}')>"
