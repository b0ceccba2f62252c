import logging
import sys
from collections.abc import Callable
from typing import Any

from loguru import logger

from mailcheck.config import get_settings

DEBUG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
INFO_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} | {message}"

# Bound by get_logger; stdlib records intercepted from uvicorn/aiohttp fall back to this
DEFAULT_LOGGER_NAME = "mailcheck"


class InterceptHandler(logging.Handler):
    """Intercept stdlib logging and redirect to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).bind(name=record.name).log(
            level, record.getMessage()
        )


def _with_fields(base_format: str) -> Callable[[dict[str, Any]], str]:
    """Append bound context (domain=..., status=...) to a format as key=value pairs."""

    def _format(record: dict[str, Any]) -> str:
        fields = "".join(f" {key}={{extra[{key}]}}" for key in record["extra"] if key != "name")
        return f"{base_format}{fields}\n{{exception}}"

    return _format


def _health_log_filter(record: dict[str, Any]) -> bool:
    """Filter health check logs - only show at DEBUG level."""
    if "/health" in record.get("message", ""):
        return bool(record["level"].no <= 10)  # DEBUG level
    return True


def setup_logging() -> None:
    """Configure loguru for the API server and the CLI."""
    settings = get_settings()

    logger.remove()
    logger.configure(extra={"name": DEFAULT_LOGGER_NAME})

    if settings.debug:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format=_with_fields(DEBUG_FORMAT),
            backtrace=True,
            diagnose=True,
        )
    else:
        logger.add(
            sys.stderr,
            level="INFO",
            format=_with_fields(INFO_FORMAT),
            filter=_health_log_filter,
            backtrace=True,
            diagnose=False,
        )

    # Intercept stdlib logging (uvicorn, aiohttp, httpx)
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ["uvicorn", "uvicorn.error", "uvicorn.access", "httpx", "aiohttp"]:
        logging.getLogger(name).handlers = [InterceptHandler()]


def get_logger(name: str) -> Any:
    """Get a logger bound to a module name."""
    return logger.bind(name=name)
