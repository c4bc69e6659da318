"""structlog setup.

Modules log through ``structlog.get_logger(__name__)`` with keyword
fields; this module wires the processor chain once per process.
"""

import logging
from typing import Optional

import structlog

from vitasnap.config import Settings, load_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        settings: Settings to apply; loaded from the environment when None

    Example:
        >>> configure_logging(Settings(log_level="DEBUG", log_json=True))
    """
    settings = settings or load_settings()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", level=level)

    renderer: structlog.types.Processor
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
