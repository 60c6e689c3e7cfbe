"""
Social API — Account Request/Response Schemas
===============================================

What:  Pydantic models for the /register and /login JSON contracts.
How:   Request fields are optional so that missing or null values reach
       AccountService, which owns the "blank username" and "short password"
       rules. FastAPI rejects wrong JSON types before the service runs.
"""

from typing import Optional

from pydantic import BaseModel, Field


class AccountCredentials(BaseModel):
    """
    Body of POST /register and POST /login.

    Example:
        {"username": "alice", "password": "pass1"}
    """
    username: Optional[str] = Field(default=None, description="Unique, non-blank username")
    password: Optional[str] = Field(default=None, description="At least 4 characters")


class AccountResponse(BaseModel):
    """
    What:  A stored account, as returned by /register and /login.

    The password is echoed back unchanged; hashing is out of scope.
    """
    account_id: int = Field(description="Generated account identifier")
    username: str
    password: str

    model_config = {"from_attributes": True}
