"""Error reporting - forwards unexpected exceptions to registered sinks.

Reporting runs after the response has been sent (as a Starlette background
task), so a slow or failing sink never changes what the client receives.
"""

from collections.abc import Callable
from typing import Any

from src.budget.core.logging import get_logger

logger = get_logger(__name__)

ErrorSink = Callable[[BaseException, dict[str, Any]], None]

_sinks: list[ErrorSink] = []


def register_sink(sink: ErrorSink) -> None:
    """Register a callable that receives every captured exception."""
    if sink not in _sinks:
        _sinks.append(sink)


def unregister_sink(sink: ErrorSink) -> None:
    if sink in _sinks:
        _sinks.remove(sink)


def clear_sinks() -> None:
    _sinks.clear()


def capture(exc: BaseException, **context: Any) -> None:
    """Log the exception and hand it to every registered sink.

    A sink raising is logged and skipped; the remaining sinks still run.
    """
    logger.error(
        "Captured exception",
        error_type=type(exc).__name__,
        error=str(exc),
        **context,
    )
    for sink in list(_sinks):
        try:
            sink(exc, context)
        except Exception:
            logger.warning(
                "Error sink failed",
                sink=getattr(sink, "__name__", repr(sink)),
                exc_info=True,
            )
