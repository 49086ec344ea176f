"""
Middleware configuration for the application.
Correlation ID, request logging and the access control gate.
"""

import time
from typing import Callable

import structlog
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request, Response
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.access import decide
from app.core.config import get_settings

logger = structlog.get_logger(__name__)


class AccessControlMiddleware(BaseHTTPMiddleware):
    """Redirect before any handler runs, based on cookie presence and route class."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        settings = get_settings()
        decision = decide(
            request.url.path,
            request.cookies.get(settings.session_cookie_name),
            protected_paths=settings.protected_paths,
            auth_only_paths=settings.auth_only_paths,
        )
        if not decision.proceed:
            logger.debug("Access gate redirect", path=request.url.path, target=decision.redirect_to)
            return RedirectResponse(decision.redirect_to, status_code=307)
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log requests and responses with timing."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        logger.info("Request started", method=request.method, path=request.url.path)

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed",
                method=request.method,
                path=request.url.path,
                process_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise

        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return response


def setup_middleware(app: FastAPI) -> None:
    """Register middleware. Starlette runs the last added one first."""
    app.add_middleware(AccessControlMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
