"""Structured logging for the thread detection service.

Log events carry counts and decisions, never correspondence: any event
field that could hold pasted text is replaced by its length before it is
rendered, whichever logger (structlog or stdlib) produced the event.

Production renders one JSON object per line; development renders colored
console output.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

SERVICE_NAME = "thread-detection"

# Event keys that may hold user correspondence
CORRESPONDENCE_KEYS = frozenset({"raw_text", "text", "body"})

# Loggers that would duplicate the request log or flood it with polling
QUIET_LOGGERS = ("uvicorn.access", "asyncio", "multipart")


def redact_correspondence(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Replace correspondence fields with their length."""
    for key in CORRESPONDENCE_KEYS.intersection(event_dict):
        value = event_dict[key]
        if isinstance(value, str):
            event_dict[key] = f"<{len(value)} chars redacted>"
    return event_dict


def service_context(app_version: str) -> Processor:
    """Build a processor stamping service name and version on every event."""

    def add_service_context(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("service", SERVICE_NAME)
        event_dict.setdefault("service_version", app_version)
        return event_dict

    return add_service_context


def build_processors(environment: str, app_version: str) -> tuple[list[Processor], Processor]:
    """
    Return the shared processor chain and the final renderer.

    Redaction runs before the exception formatter and renderer so nothing
    downstream ever sees the raw text.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        service_context(app_version),
        redact_correspondence,
    ]

    if environment.lower() == "production":
        processors.append(structlog.processors.format_exc_info)
        return processors, structlog.processors.JSONRenderer()

    processors.append(structlog.processors.StackInfoRenderer())
    return processors, structlog.dev.ConsoleRenderer(colors=True)


def configure_logging(
    log_level: str = "INFO",
    environment: str = "development",
    app_version: str = "unknown",
) -> None:
    """Configure structlog and route stdlib logging through the same renderer.

    Args:
        log_level: Level name; unknown names fall back to INFO
        environment: "production" selects JSON output
        app_version: Stamped on every event as ``service_version``
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    processors, renderer = build_processors(environment, app_version)

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=processors)
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=logging.getLevelName(level),
        environment=environment,
    )
