"""Structured logging configuration using structlog."""

import logging

import structlog
from rich.logging import RichHandler

from ..constants import CONSTANTS


def resolve_log_level(level: str | None = None) -> int:
    """Translate a level name such as ``"info"`` into a logging level number."""
    name = (level or CONSTANTS.DYNAMIC_RENDERING_LOG_LEVEL).lower()
    if name not in CONSTANTS.LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    return getattr(logging, name.upper())


def setup_logging(verbose: bool = False, level: str | None = None) -> None:
    """Configure structured logging with Rich formatting.

    Args:
        verbose: Enable debug logging and console rendering if True
        level: Level name used when not verbose, defaults to the
            ``DYNAMIC_RENDERING_LOG_LEVEL`` setting
    """
    log_level = logging.DEBUG if verbose else resolve_log_level(level)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.StackInfoRenderer(),
            # Pretty print for development, JSON for production
            structlog.dev.ConsoleRenderer() if verbose else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )
