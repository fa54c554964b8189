"""
Structured logging setup using structlog directly.

Nothing is configured at import time; applications call
``configure_logging`` once during start-up.
"""

import logging

import structlog

from payclient.settings import ClientSettings, LogFormat, get_settings


def configure_logging(settings: ClientSettings | None = None) -> None:
    """
    Setup structured logging with structlog.

    Args:
        settings: Client settings, defaults to the process-wide instance
    """
    settings = settings or get_settings()

    logging.basicConfig(format="%(message)s", level=settings.log_level.value)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
