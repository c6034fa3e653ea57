"""
Logging Configuration

Structured logging setup using structlog.

Log Output:
===========
Development:
    2025-03-02 18:04:11 [info     ] Post created                   post_id=3f1c... user_id=9a2b...

Production (JSON):
    {"timestamp": "2025-03-02T18:04:11", "level": "info", "event": "Post created", "post_id": "3f1c..."}

Usage:
======
    from socialstream.shared.core.logging import logger, get_logger, log_context

    logger.info("User registered", username=username)

    store_logger = get_logger("store")
    store_logger.debug("Collection written", key=key, size=len(records))

    # Bind values to every log line of the current request
    log_context(method="POST", path="/posts")
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.typing import Processor

from socialstream.config.settings import settings


def setup_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        level: Log level name, defaults to settings.LOG_LEVEL
        json_output: Render JSON lines instead of colored console output.
            Defaults to JSON everywhere except development.
    """
    level = (level or settings.LOG_LEVEL).upper()
    if json_output is None:
        json_output = not settings.is_development

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to module name if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Bind key-value pairs to all subsequent log calls in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop everything bound with log_context()."""
    structlog.contextvars.clear_contextvars()


# Initialize logging on module import
setup_logging()

# Default logger instance for convenient import
logger = get_logger("socialstream")
