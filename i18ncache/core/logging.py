"""Structured logging for the i18n-cache library.

Library modules log through structlog proxies obtained from
get_module_logger(). Importing the library configures nothing: events go
through whatever structlog and stdlib logging setup the host application
has, and stdlib loggers are named after the emitting module so hosts can
tune the ``i18ncache`` hierarchy like any other library.

Applications without a logging setup of their own can opt in once at
startup:

    from i18ncache.core.logging import configure_logging

    configure_logging()                       # console in dev, JSON in prod
    translator = create_translator(setup_logging=True)   # same, via factory
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from .config import settings

LIBRARY_LOGGER = "i18ncache"


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _processors(json_output: bool) -> List[Any]:
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and stdlib logging for an application.

    Never called by the library itself. Under pytest all output is
    suppressed.

    Args:
        log_level: Optional override for log level. Defaults to settings.LOG_LEVEL.
        is_production: Optional override for production mode. Controls JSON
            vs console output.

    Returns:
        The library's root logger.
    """
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
        return structlog.stdlib.get_logger(LIBRARY_LOGGER)

    prod_mode = is_production if is_production is not None else settings.is_production
    level_name = log_level or settings.LOG_LEVEL

    structlog.configure(
        processors=_processors(json_output=prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger(LIBRARY_LOGGER)


def get_module_logger() -> Any:
    """Get a lazy logger for the calling module.

    The returned proxy resolves the structlog configuration on first use,
    so a host configuring logging after importing the library still
    receives these events. ``component`` and ``module_path`` are bound on
    every event.

    Example:
        # In i18ncache/i18n/loader.py
        logger = get_module_logger()
        # context: {"component": "loader", "module_path": "i18ncache.i18n.loader"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None

    if module is None:
        return structlog.get_logger(LIBRARY_LOGGER, component="unknown")

    module_name = module.__name__
    return structlog.get_logger(
        module_name,
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
