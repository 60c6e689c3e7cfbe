"""
Social API — Message Request/Response Schemas
===============================================

What:  Pydantic models for the /messages JSON contracts.
How:   As with accounts, request fields are optional and the business rules
       (text length, blankness, positive posted_by) live in MessageService.
"""

from typing import Optional

from pydantic import BaseModel, Field

from social_api.schemas.common import StoredInt


class MessageCreate(BaseModel):
    """
    Body of POST /messages.

    Example:
        {"posted_by": 1, "message_text": "hi", "time_posted_epoch": 1000}
    """
    posted_by: Optional[StoredInt] = Field(default=None, description="Author account_id (> 0)")
    message_text: Optional[str] = Field(default=None, description="1-255 characters, non-blank")
    time_posted_epoch: Optional[StoredInt] = Field(
        default=None,
        description="Caller-supplied timestamp; stored as 0 when omitted",
    )


class MessageTextUpdate(BaseModel):
    """Body of PATCH /messages/{message_id}. Other fields are ignored."""
    message_text: Optional[str] = Field(default=None, description="Replacement text")


class MessageResponse(BaseModel):
    """A stored message as returned by every /messages endpoint."""
    message_id: int = Field(description="Generated message identifier")
    posted_by: int
    message_text: str
    time_posted_epoch: int

    model_config = {"from_attributes": True}
