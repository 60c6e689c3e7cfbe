"""
Social API — Account Store
============================

What:  Parameterized statements against the `account` table.
Who:   Called by AccountService only.

Query plan:
    username_exists     SELECT account_id FROM account WHERE username = :u LIMIT 1
    insert              INSERT INTO account (username, password) VALUES (:u, :p)
    get_by_credentials  SELECT * FROM account WHERE username = :u AND password = :p
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from social_api.exceptions import DuplicateUsernameError
from social_api.models.account import Account
from social_api.repositories.base import Store

logger = logging.getLogger(__name__)


class AccountStore(Store):
    table = "account"

    async def username_exists(self, db: AsyncSession, username: str) -> bool:
        try:
            result = await db.execute(
                select(Account.account_id).where(Account.username == username).limit(1)
            )
            return result.scalar_one_or_none() is not None
        except SQLAlchemyError as e:
            raise await self._database_error(db, "username_exists", e)

    async def insert(self, db: AsyncSession, username: str, password: str) -> Account:
        """
        Insert a new account and return it with its generated account_id.

        Raises:
            DuplicateUsernameError: the UNIQUE constraint rejected the username
                (a concurrent registration won the race past username_exists)
            DatabaseError: any other driver failure
        """
        account = Account(username=username, password=password)
        try:
            db.add(account)
            await db.flush()  # Emits the INSERT and assigns account_id
        except IntegrityError:
            await db.rollback()
            logger.info("Insert rejected by unique constraint: username=%s", username)
            raise DuplicateUsernameError(username)
        except SQLAlchemyError as e:
            raise await self._database_error(db, "insert", e)

        logger.info("Account created: account_id=%d", account.account_id)
        return account

    async def get_by_credentials(
        self, db: AsyncSession, username: str, password: str
    ) -> Optional[Account]:
        """Exact, case-sensitive match on both columns. None when nothing matches."""
        try:
            result = await db.execute(
                select(Account).where(
                    Account.username == username,
                    Account.password == password,
                )
            )
            return result.scalars().first()
        except SQLAlchemyError as e:
            raise await self._database_error(db, "get_by_credentials", e)


account_store = AccountStore()
