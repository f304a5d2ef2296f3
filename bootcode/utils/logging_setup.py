import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import LoggerFactory

from ..config import LoggingSettings


def configure_logging(settings: Optional[LoggingSettings] = None, force: bool = False) -> None:
    """
    Configure structured logging for the bootcode package.

    Args:
        settings: Level and renderer to use; read from the environment when omitted
        force: Reconfigure even if structlog has already been configured
    """
    if structlog.is_configured() and not force:
        return

    settings = settings if settings is not None else LoggingSettings.from_env()

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, settings.level),
        stream=sys.stdout,
        force=True,
    )

    if settings.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logger = structlog.get_logger()
    logger.info("Logging configured", log_level=settings.level, log_format=settings.format)
