"""
Social API — Shared Response Schemas
======================================

What:  Error and health payloads that are not tied to a single resource.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, Field, StrictInt

# Signed 64-bit range of the integer columns; larger values fail request
# validation instead of reaching the database driver.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# JSON integer field: no bool or float coercion, bounded to INT64.
StoredInt = Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]


class ErrorResponse(BaseModel):
    """
    What:  Body returned for unexpected server errors (HTTP 500).

    Business-rule failures answer with an empty body instead; this shape is
    only used by the catch-all exception handler.
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since the health module loaded")
