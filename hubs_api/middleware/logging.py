"""
Lambda Hubs API — Request Logging Middleware
==============================================

What:  One access-log line per request: method, path, matched route,
       status, duration, request id.
When:  Runs inside RequestIDMiddleware so the id is already set.

The matched route template (e.g. /api/hubs/{hub_id}) is logged next to the
concrete path, so the alias prefixes of one route group can be told apart
and still grouped.

Request bodies are never logged.
"""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from hubs_api.middleware.request_id import request_id_var

logger = logging.getLogger("hubs_api.access")

# Probed every few seconds by orchestrators; not worth a log line each time
QUIET_PATHS = {"/health"}


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, everything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def _route_template(request: Request) -> Optional[str]:
    route = request.scope.get("route")
    return getattr(route, "path", None)


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        rid = request_id_var.get("")
        route = _route_template(request) or "-"

        logger.log(
            level_for_status(response.status_code),
            "[%s] %s %s (%s) → %d in %.1fms",
            rid,
            request.method,
            path,
            route,
            response.status_code,
            elapsed_ms,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "route": route,
                "status": response.status_code,
                "duration_ms": round(elapsed_ms, 2),
            },
        )
        return response
