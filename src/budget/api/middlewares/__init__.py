"""Application middlewares."""

from asgi_correlation_id import CorrelationIdMiddleware, correlation_id
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import RequestResponseEndpoint

from src.budget.core.config import Settings
from src.budget.core.logging import bind_request_context, clear_request_context
from src.budget.core.security import SecurityHeadersMiddleware

__all__ = ["setup_middlewares"]


async def logging_context_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Bind request id, method and path to the log context of each request."""
    clear_request_context()
    bind_request_context(correlation_id.get(), request.method, request.url.path)
    try:
        return await call_next(request)
    finally:
        clear_request_context()


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """Configure all application middlewares.

    Starlette wraps each added middleware around the previous ones, so the
    last one added runs first on the request.
    """
    # Logging context - innermost, reads the correlation id set further out
    app.middleware("http")(logging_context_middleware)

    app.add_middleware(
        SecurityHeadersMiddleware,
        content_security_policy=settings.csp_production if settings.app_env == "production" else None,
    )

    # CORS - handle cross-origin requests from the front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Correlation ID - generates/propagates X-Request-ID (outermost)
    app.add_middleware(CorrelationIdMiddleware)
