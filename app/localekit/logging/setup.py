"""Structlog configuration and logger setup.

Usage:
    from localekit.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger

from localekit.configuration import Settings, get_settings

# Above CRITICAL, so nothing is emitted.
SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Return True when running under pytest."""
    return "pytest" in sys.modules


def _apply(processors: List, level: int, force: bool = False) -> BoundLogger:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=force)
    return structlog.stdlib.get_logger()


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog for the process.

    Development renders colored console lines, production renders JSON.
    Under pytest every logger is silenced.

    Args:
        settings: Source of LOG_LEVEL and is_production (default: get_settings()).
        log_level: Overrides settings.LOG_LEVEL.
        is_production: Overrides settings.is_production.

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        logging.root.setLevel(SILENT)
        return _apply(
            [
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            SILENT,
            force=True,
        )

    settings = settings or get_settings()
    if is_production is None:
        is_production = settings.is_production

    renderer = (
        structlog.processors.JSONRenderer()
        if is_production
        else structlog.dev.ConsoleRenderer()
    )
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]
    return _apply(processors, _level(log_level or settings.LOG_LEVEL))


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    The logger carries ``component`` (last part of the module name) and
    ``module_path``:

        # in localekit/i18n/loader.py
        logger = get_module_logger()
        # {"component": "loader", "module_path": "localekit.i18n.loader"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is None:
        return logger

    module_name = caller.f_globals.get("__name__")
    if not module_name:
        return logger.bind(component="unknown")

    return logger.bind(component=module_name.rsplit(".", 1)[-1], module_path=module_name)
