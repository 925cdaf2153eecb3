"""
Logging setup and structured logging helpers.
"""
import logging
import sys
from typing import Any, Optional

LOGGER_NAME = "daylio_dashboard"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(level: str = "INFO") -> None:
    """Configure the application logger once; later calls only adjust the level."""
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False


def _format_context(context: dict) -> str:
    items = [f"{key}={value}" for key, value in context.items() if value is not None]
    return f" ({', '.join(items)})" if items else ""


def log_info(message: str, **context: Any) -> None:
    logger.info(f"{message}{_format_context(context)}")


def log_warning(message: str, **context: Any) -> None:
    logger.warning(f"{message}{_format_context(context)}")


def log_debug(message: str, **context: Any) -> None:
    logger.debug(f"{message}{_format_context(context)}")


def log_error(
    error: BaseException | str,
    request_id: Optional[str] = None,
    **context: Any,
) -> None:
    """Log an exception (with traceback when available) or a plain error message."""
    suffix = _format_context({"request_id": request_id, **context})
    if isinstance(error, BaseException):
        logger.error(
            f"{type(error).__name__}: {error}{suffix}",
            exc_info=(type(error), error, error.__traceback__),
        )
    else:
        logger.error(f"{error}{suffix}")
