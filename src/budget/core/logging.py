"""Structured logging shared by the API server and the Streamlit client.

Both processes log through structlog. Each entry carries a `service` field
("api" or "client") so the two streams can be told apart once collected.
"""

import logging
import sys
from uuid import UUID

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars
from structlog.typing import EventDict, Processor, WrappedLogger

# Third-party loggers that are chatty at INFO
QUIET_LOGGERS = (
    "sqlalchemy.engine",
    "aiosqlite",
    "asyncpg",
    "alembic.runtime.migration",
    "httpx",
    "httpcore",
)


def service_processor(service: str) -> Processor:
    """Build a processor that stamps every entry with the emitting service."""

    def add_service(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        return event_dict

    return add_service


def setup_logging(debug: bool = False, service: str = "api") -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        debug: Coloured console output when True, JSON lines otherwise.
        service: Value of the `service` field on every entry.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        service_processor(service),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(
    request_id: str | None, method: str | None = None, path: str | None = None
) -> None:
    """Bind the correlation id and route of the current request.

    Missing values are left unbound rather than logged as null.
    """
    context = {"request_id": request_id, "method": method, "path": path}
    bind_contextvars(**{key: value for key, value in context.items() if value})


def bind_user_context(user_id: UUID, email: str | None = None) -> None:
    """Bind the authenticated owner to subsequent log calls.

    The email is bound only when `log_user_emails` is enabled (GDPR).
    """
    from src.budget.core.config import get_settings

    bind_contextvars(user_id=str(user_id))
    if email and get_settings().log_user_emails:
        bind_contextvars(user_email=email)


def clear_request_context() -> None:
    clear_contextvars()
