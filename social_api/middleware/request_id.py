"""
Social API — Request ID Middleware
====================================

What:  Assigns a correlation ID to each request and returns it in the response.
How:   Uses the client's X-Request-ID header when present, otherwise an 8-char
       UUID prefix. The ID is stored in a ContextVar for loggers and exception
       handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)

        response = await call_next(request)

        response.headers["X-Request-ID"] = rid
        return response
