"""
NetDemo — Request Logging Middleware
======================================

What:  One access-log line per HTTP request, plus a DEBUG line with the
       counter value after each accepted POST /incr.
How:   Times the downstream call and logs method, path, status, duration,
       request ID and client address on the `netdemo.access` logger.
When:  Inside RequestIDMiddleware, so the request ID is already set.

Level by status (level_for_status):
    5xx → ERROR
    4xx → WARNING (includes every /401 and non-POST /incr call)
    else → INFO

The counter value logged for /incr is read after the response is built.
Another increment may land in between, so under concurrent load it is the
value at log time, not necessarily the one in that response body.

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from netdemo.middleware.request_id import request_id_var
from netdemo.routes.counter import COUNTER_PATH

logger = logging.getLogger("netdemo.access")


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log for the demo endpoints, with counter tracking on /incr."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        # request.client is None under some test transports
        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        fields = {
            "request_id": rid,
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": round(elapsed_ms, 2),
            "client_ip": client_ip,
        }

        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms [%s] from %s",
            fields["method"],
            fields["path"],
            fields["status"],
            elapsed_ms,
            rid,
            client_ip,
            extra=fields,
        )

        if fields["path"] == COUNTER_PATH and fields["method"] == "POST" and response.status_code == 200:
            value = request.app.state.counter.value
            logger.debug("[%s] counter now %d", rid, value, extra={**fields, "counter": value})

        return response
