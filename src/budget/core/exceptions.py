"""Domain errors and the handlers that render them as response envelopes."""

from enum import StrEnum

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.background import BackgroundTask
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.budget.core.error_reporting import capture
from src.budget.core.logging import get_logger

logger = get_logger(__name__)


class ErrorCode(StrEnum):
    """Failure codes carried in the `code` field of an error envelope."""

    INVALID_BODY = "INVALID_BODY"
    NOT_FOUND = "NOT_FOUND"
    SERVER_ERROR = "SERVER_ERROR"


class BudgetError(Exception):
    """Base class for expected, per-request failures."""

    code: ErrorCode = ErrorCode.SERVER_ERROR
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None):
        super().__init__(message or self.code.value)
        self.message = message


class InvalidBodyError(BudgetError):
    """A required input is missing or malformed."""

    code = ErrorCode.INVALID_BODY
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(BudgetError):
    """The record does not exist or is not owned by the caller.

    The two cases are deliberately indistinguishable to the caller.
    """

    code = ErrorCode.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND


def error_envelope(code: ErrorCode, error: str | None = None) -> dict[str, object]:
    body: dict[str, object] = {"ok": False, "code": code.value}
    if error is not None:
        body["error"] = error
    return body


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure handlers mapping every failure onto the response envelope."""

    @app.exception_handler(BudgetError)
    async def budget_error_handler(request: Request, exc: BudgetError) -> JSONResponse:
        logger.info(
            "Request rejected",
            code=exc.code.value,
            path=request.url.path,
            reason=exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content=error_envelope(exc.code))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info(
            "Request body failed validation",
            path=request.url.path,
            errors=len(exc.errors()),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_envelope(ErrorCode.INVALID_BODY),
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "ok": False,
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "ok": False,
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope(ErrorCode.SERVER_ERROR, str(exc)),
            background=BackgroundTask(
                capture,
                exc,
                request_id=request_id,
                path=request.url.path,
                method=request.method,
            ),
        )
