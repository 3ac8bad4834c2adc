from __future__ import annotations

import logging
import os
from typing import Any

import structlog


def _get_log_level() -> int:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level, logging.INFO)


def _get_log_format(app_env: str) -> str:
    # console output by default in dev, JSON lines everywhere else
    if "LOG_FORMAT" in os.environ:
        return os.environ["LOG_FORMAT"].lower()
    return "console" if app_env == "dev" else "json"


def setup_logging(app_env: str = "dev") -> None:
    """Configure structlog on top of stdlib logging.

    - ISO/UTC timestamp, level, event and bound fields on every line
    - contextvars merged so request_id flows into check-in/gym service events
    - stdlib and uvicorn records go through the same renderer
    """

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if _get_log_format(app_env) == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logging.basicConfig(level=_get_log_level(), handlers=[handler], force=True)


def get_logger(*args: Any, **kwargs: Any) -> structlog.stdlib.BoundLogger:  # convenience
    return structlog.get_logger(*args, **kwargs)
