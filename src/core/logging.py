"""Logging configuration for the cache engine.

Routes structlog events through stdlib logging with either a JSON or a
console renderer. Caches log through ``get_logger`` and bind their own
name, so several caches in one process stay distinguishable.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

import config


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    level_name = (level or config.LOG_LEVEL or "INFO").upper()
    log_level = getattr(logging, level_name, logging.INFO)

    if (fmt or config.LOG_FORMAT) == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # Reduce noise from the HTTP backing store
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> Any:
    return structlog.get_logger(name or "cache")
