"""
Campus Data Backend — Access Log Middleware
============================================

What:  One log line per HTTP request: method, path, status, duration, caller.
Why:   Lets operators see who changed what (admin mutations are the
       interesting lines) and spot slow or failing endpoints.
How:   Times the downstream call and logs on logger "campusdata.access" with
       a level chosen from the status code.

Log line:
    2024-01-15T12:00:00 [INFO] campusdata.access: POST /api/ucsbdates/post 200 12.3ms [a1b2c3d4] admin@ucsb.edu from 10.0.0.7

Privacy:
    Query strings and bodies are NOT logged; they may hold personal data
    (requester emails, explanations).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from campusdata.middleware.request_id import request_id_var

logger = logging.getLogger("campusdata.access")

ANONYMOUS_CALLER = "anonymous"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path

        # Health checks run every few seconds
        if path == "/health":
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        # Set by the current-user dependency; absent on public routes
        caller = getattr(request.state, "user_email", None) or ANONYMOUS_CALLER
        rid = request_id_var.get("")

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] %s from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            caller,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "caller": caller,
                "client_ip": client_ip,
            },
        )
        return response
