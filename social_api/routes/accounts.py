"""
Social API — Account Route Handlers
=====================================

What:  POST /register and POST /login.
How:   Parse the JSON body, delegate to AccountService, serialize the account.
       Every failure answers with an empty body:

    Endpoint        Failure                                      Status
    POST /register  ValidationError, DuplicateUsernameError,     400
                    DatabaseError
    POST /login     InvalidCredentialsError, DatabaseError       401
"""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from social_api.database import get_db_session
from social_api.exceptions import (
    DatabaseError,
    InvalidCredentialsError,
    ValidationError,
)
from social_api.schemas.account import AccountCredentials, AccountResponse
from social_api.services.account_service import account_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Accounts"])


@router.post(
    "/register",
    response_model=AccountResponse,
    responses={
        200: {"description": "Account created", "model": AccountResponse},
        400: {"description": "Blank username, short password, or username taken (empty body)"},
    },
    summary="Register a new account",
)
async def register(
    payload: AccountCredentials,
    db: AsyncSession = Depends(get_db_session),
):
    try:
        return await account_service.register(db, payload)
    except (ValidationError, DatabaseError) as e:
        logger.info("Registration failed: %s", e.message)
        return Response(status_code=400)


@router.post(
    "/login",
    response_model=AccountResponse,
    responses={
        200: {"description": "Credentials matched", "model": AccountResponse},
        401: {"description": "No account matches (empty body)"},
    },
    summary="Log in with username and password",
)
async def login(
    payload: AccountCredentials,
    db: AsyncSession = Depends(get_db_session),
):
    """
    Wrong username and wrong password are indistinguishable to the caller.
    """
    try:
        return await account_service.login(db, payload.username, payload.password)
    except (InvalidCredentialsError, DatabaseError):
        return Response(status_code=401)
