"""FastAPI middleware for request tracing and metrics"""

import uuid
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from meal_topup.infrastructure.observability.metrics import request_duration_histogram

UNMATCHED_ROUTE = "unmatched"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add unique request ID to each request for tracing, reusing an incoming X-Request-ID"""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record HTTP request metrics, labelled by route template to bound label cardinality"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        duration = time.time() - start_time
        request_duration_histogram.labels(
            method=request.method,
            endpoint=route_label(request),
            status=response.status_code,
        ).observe(duration)

        return response


def route_label(request: Request) -> str:
    """Path template of the matched route; unknown paths share one label"""
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ROUTE)
