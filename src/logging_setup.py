"""Logging setup — stdlib logging routed through structlog.

Modules log through ``logging.getLogger(__name__)``; the embedding
application calls ``configure_logging()`` once at startup.
"""

from __future__ import annotations

import logging
import sys

import structlog

from src.config import settings


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging and structlog with the console renderer."""
    numeric_level = getattr(logging, (level or settings.log_level).upper())
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        stream=sys.stdout,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(numeric_level)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    logging.getLogger(__name__).debug("Logging configured (env=%s)", settings.environment)
