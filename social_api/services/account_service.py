"""
Social API — Account Service (Business Rules)
===============================================

What:  Registration and login rules sitting between the routes and AccountStore.
How:   Validates the candidate, checks username availability, then delegates
       the single insert (or the credential lookup) to the store.
Who:   Called by the /register and /login route handlers.

Registration rules (checked in this order):
    1. username present and not blank (whitespace-only counts as blank)
    2. password present and at least PASSWORD_MIN_LENGTH characters
    3. username not already registered

Login:
    Exact, case-sensitive plaintext match on username AND password. A wrong
    username and a wrong password produce the same InvalidCredentialsError.
"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from social_api.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    ValidationError,
)
from social_api.repositories.account_store import AccountStore, account_store
from social_api.schemas.account import AccountCredentials, AccountResponse

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 4


class AccountService:
    """
    Business logic for accounts.

    The store is injectable so unit tests can substitute a mock.
    """

    def __init__(self, store: Optional[AccountStore] = None):
        self.store = store or account_store

    async def register(
        self, db: AsyncSession, candidate: AccountCredentials
    ) -> AccountResponse:
        """
        Create a new account.

        Returns:
            AccountResponse including the newly generated account_id

        Raises:
            ValidationError: blank username or short password
            DuplicateUsernameError: username already registered
            DatabaseError: storage failure
        """
        username = candidate.username
        password = candidate.password

        if username is None or not username.strip():
            raise ValidationError(message="Username must not be blank", field="username")

        if password is None or len(password) < PASSWORD_MIN_LENGTH:
            raise ValidationError(
                message=f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
                field="password",
            )

        if await self.store.username_exists(db, username):
            logger.info("Registration rejected: username already taken")
            raise DuplicateUsernameError(username)

        account = await self.store.insert(db, username=username, password=password)
        return AccountResponse.model_validate(account)

    async def login(
        self, db: AsyncSession, username: Optional[str], password: Optional[str]
    ) -> AccountResponse:
        """
        Look up the account matching both credentials.

        Raises:
            InvalidCredentialsError: no exact match (or a credential is missing)
            DatabaseError: storage failure
        """
        if username is None or password is None:
            raise InvalidCredentialsError()

        account = await self.store.get_by_credentials(db, username=username, password=password)
        if account is None:
            raise InvalidCredentialsError()

        return AccountResponse.model_validate(account)


account_service = AccountService()
