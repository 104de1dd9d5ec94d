"""Logging configuration for the beer stock backend.

Standard library logging carries the output; structlog formats it.
"""
import logging
import sys

import structlog


def setup_stdlib_logging(level: str) -> None:
    """Configure standard library logging."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    logging.getLogger("asyncio").setLevel(logging.WARNING)


def setup_structlog(json_logs: bool = False) -> None:
    """Configure structlog for structured logging."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # module-level loggers must pick up later reconfiguration (tests capture logs)
        cache_logger_on_first_use=False,
    )


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure all logging for the application."""
    setup_stdlib_logging(level.upper())
    setup_structlog(json_logs)
