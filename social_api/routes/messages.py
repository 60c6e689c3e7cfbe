"""
Social API — Message Route Handlers
=====================================

What:  Message CRUD plus the per-account message listing.
How:   Path parameters are declared as bounded ints, so non-numeric or
       out-of-range ids fail request validation (400, see main.py) before
       reaching a handler. Handlers delegate to MessageService and map its
       exceptions per endpoint:

    Endpoint                          Failure                          Outcome
    POST   /messages                  ValidationError, DatabaseError   400, empty
    GET    /messages                  DatabaseError                    200, []
    GET    /messages/{id}             NotFoundError, DatabaseError     200, empty
    DELETE /messages/{id}             NotFoundError, DatabaseError     200, empty
    PATCH  /messages/{id}             ValidationError, NotFoundError,  400, empty
                                      DatabaseError
    GET    /accounts/{id}/messages    DatabaseError                    200, []

The 200-with-empty-body answers for a missing message are part of the public
contract; clients test for an empty body rather than a 404.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.ext.asyncio import AsyncSession

from social_api.database import get_db_session
from social_api.exceptions import DatabaseError, NotFoundError, ValidationError
from social_api.schemas.common import INT64_MAX, INT64_MIN
from social_api.schemas.message import MessageCreate, MessageResponse, MessageTextUpdate
from social_api.services.message_service import message_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Messages"])


@router.post(
    "/messages",
    response_model=MessageResponse,
    responses={400: {"description": "Invalid text or posted_by (empty body)"}},
    summary="Post a new message",
)
async def create_message(
    payload: MessageCreate,
    db: AsyncSession = Depends(get_db_session),
):
    try:
        return await message_service.create(db, payload)
    except (ValidationError, DatabaseError) as e:
        logger.info("Message rejected: %s", e.message)
        return Response(status_code=400)


@router.get(
    "/messages",
    response_model=List[MessageResponse],
    summary="List every message",
)
async def list_messages(db: AsyncSession = Depends(get_db_session)):
    try:
        return await message_service.get_all(db)
    except DatabaseError:
        return []


@router.get(
    "/messages/{message_id}",
    response_model=MessageResponse,
    responses={200: {"description": "The message, or an empty body if it does not exist"}},
    summary="Get a message by id",
)
async def get_message(
    message_id: int = Path(ge=INT64_MIN, le=INT64_MAX, description="Message identifier"),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        return await message_service.get_by_id(db, message_id)
    except (NotFoundError, DatabaseError):
        return Response(status_code=200)


@router.delete(
    "/messages/{message_id}",
    response_model=MessageResponse,
    responses={200: {"description": "The deleted message, or an empty body if none existed"}},
    summary="Delete a message by id",
)
async def delete_message(
    message_id: int = Path(ge=INT64_MIN, le=INT64_MAX, description="Message identifier"),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        return await message_service.delete_by_id(db, message_id)
    except (NotFoundError, DatabaseError):
        return Response(status_code=200)


@router.patch(
    "/messages/{message_id}",
    response_model=MessageResponse,
    responses={400: {"description": "Invalid text or unknown message (empty body)"}},
    summary="Replace a message's text",
)
async def update_message(
    payload: MessageTextUpdate,
    message_id: int = Path(ge=INT64_MIN, le=INT64_MAX, description="Message identifier"),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        return await message_service.update_text(db, message_id, payload.message_text)
    except (ValidationError, NotFoundError, DatabaseError) as e:
        logger.info("Message %d not updated: %s", message_id, e.message)
        return Response(status_code=400)


@router.get(
    "/accounts/{account_id}/messages",
    response_model=List[MessageResponse],
    summary="List messages posted by an account",
)
async def list_account_messages(
    account_id: int = Path(ge=INT64_MIN, le=INT64_MAX, description="Author account_id"),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        return await message_service.get_by_account(db, account_id)
    except DatabaseError:
        return []
