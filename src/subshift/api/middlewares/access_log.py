# src/subshift/api/middlewares/access_log.py
from __future__ import annotations

import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from subshift.api.metrics import inc_http_request
from subshift.utils.logger import get_logger, get_trace_id

logger = get_logger("subshift.access")

UNMATCHED_ROUTE = "<unmatched>"


def route_label(request: Request) -> str:
    """
    Metric label for a request: the matched route template, never the raw URL.

    The router stores the matched route in the shared scope, so this is only
    meaningful after the downstream app has run. Anything that matched no
    route (404 scans, typos) collapses into one label.
    """
    route = request.scope.get("route")
    template = getattr(route, "path", None)
    return template if isinstance(template, str) and template else UNMATCHED_ROUTE


class AccessLogMiddleware(BaseHTTPMiddleware):
    """
    ACCESS log line + request counter per HTTP request.
    Registered inside RequestContextMiddleware, which owns the trace id.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        t0 = time.perf_counter()
        status = 500
        try:
            resp = await call_next(request)
            status = resp.status_code
            return resp
        finally:
            elapsed_ms = (time.perf_counter() - t0) * 1000.0
            inc_http_request(method=request.method, route=route_label(request), status=status)
            logger.info(
                "ACCESS %s %s -> %s in %.1fms route=%s trace=%s",
                request.method,
                request.url.path,
                status,
                elapsed_ms,
                route_label(request),
                get_trace_id() or "-",
            )
