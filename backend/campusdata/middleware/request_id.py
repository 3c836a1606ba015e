"""
Campus Data Backend — Request ID Middleware
============================================

What:  Assigns a correlation ID to each request and echoes it in the response.
Why:   Error bodies carry `request_id`, so a user report can be matched with
       the server-side log lines of the same request.
How:   Reuses a client-supplied X-Request-ID header or generates a short UUID,
       stores it in a ContextVar for loggers and exception handlers, and sets
       the response header.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests share a thread but not this value
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 chars is enough to correlate within a log window
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
