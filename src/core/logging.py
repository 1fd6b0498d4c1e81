"""
Glossary-Term-Service - Structured Logging

configure_logging() runs once from src/main.py; every module then calls
get_logger(__name__) and emits snake_case events with keyword fields.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor

SERVICE_NAME = "glossary-term-service"

_configured: bool = False


def add_service_info(
    logger: logging.Logger,  # noqa: ARG001 - structlog processor signature
    method_name: str,  # noqa: ARG001 - structlog processor signature
    event_dict: EventDict,
) -> EventDict:
    """Stamp the service name on every event."""
    event_dict["service"] = SERVICE_NAME
    return event_dict


def _build_processors(json_output: bool) -> list[Processor]:
    renderer: Processor = (
        structlog.processors.JSONRenderer(ensure_ascii=False)
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_info,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(log_level: str = "INFO", json_output: bool = True) -> None:
    """Configure structlog and stdlib logging for the process.

    Later calls are no-ops, so importing src.main repeatedly in tests does
    not stack handlers.

    Args:
        log_level: Level name such as "DEBUG" or "WARNING"; unknown names
            fall back to INFO.
        json_output: Render JSON lines (production) instead of the
            colored console format.
    """
    global _configured

    if _configured:
        return

    level = getattr(logging, log_level.upper(), logging.INFO)

    # uvicorn logs through the stdlib root logger
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    structlog.configure(
        processors=_build_processors(json_output),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configured = True


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
