"""Structured logging setup.

Usage:
    from core.logging import get_module_logger

    logger = get_module_logger()
    logger.info("loaded_string_table", template_count=12)
"""

import logging
import inspect
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger
from .config import settings

APP_NAME = "localized-keys"


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def add_app_name(logger, method_name, event_dict):
    """Processor tagging every event with the application name."""
    event_dict.setdefault("app", APP_NAME)
    return event_dict


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog on top of the standard logging module.

    Args:
        log_level: Level name overriding settings.LOG_LEVEL.
        is_production: Overrides settings.is_production. Production renders
            JSON lines, development renders console output.

    Returns:
        Root structlog logger.
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    if log_level is None:
        log_level = settings.LOG_LEVEL
    if is_production is None:
        is_production = settings.is_production

    renderer = (
        structlog.processors.JSONRenderer()
        if is_production
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_app_name,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper(), logging.INFO),
        force=True,
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger bound to a module's name.

    Args:
        name: Module name. Defaults to the calling module.

    Returns:
        Logger with component and module_path bound.
    """
    if name is None:
        current_frame = inspect.currentframe()
        module = inspect.getmodule(current_frame.f_back) if current_frame else None
        if module is None:
            return logger.bind(component="unknown")
        name = module.__name__

    return logger.bind(component=name.rsplit(".", 1)[-1], module_path=name)
