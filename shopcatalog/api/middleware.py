"""Request context middleware for the Shop Catalog API.

Every request gets a correlation id, bound into the structlog context so
catalog and classifier log lines can be traced back to the HTTP call.
Requests addressed to a single product also bind the lookup term.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"
PRODUCTS_PREFIX = "/products/"


def product_term_from_path(path: str) -> str | None:
    """Return the product id, title or slug addressed by a request path."""
    if not path.startswith(PRODUCTS_PREFIX):
        return None
    term = path[len(PRODUCTS_PREFIX):].strip("/")
    return term or None


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind request id and product term to the log context."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id

        context = {"request_id": request_id}
        term = product_term_from_path(request.url.path)
        if term is not None:
            context["product_term"] = term
        structlog.contextvars.bind_contextvars(**context)

        start_time = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            logger.info(
                "Catalog request handled",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            structlog.contextvars.unbind_contextvars(*context)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def setup_middleware(app: FastAPI) -> None:
    """Install the catalog middleware on the application."""
    app.add_middleware(RequestContextMiddleware)
