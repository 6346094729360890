"""Logging configuration module."""

from logging import (
    CRITICAL,
    DEBUG,
    ERROR,
    INFO,
    WARNING,
    Handler,
    Logger,
    StreamHandler,
    getLogger,
)
from typing import cast

import structlog
from structlog import dev, processors, stdlib
from structlog.processors import JSONRenderer, TimeStamper, dict_tracebacks
from structlog.stdlib import BoundLogger

# Define log levels
LOG_LEVELS: dict[str, int] = {
    "debug": DEBUG,
    "info": INFO,
    "warning": WARNING,
    "error": ERROR,
    "critical": CRITICAL,
}


def resolve_level(level: str | int) -> int:
    """Translate a level name such as ``"info"`` into its numeric value.

    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    return LOG_LEVELS.get(level.strip().lower(), INFO)


def configure_logging(
    testing: bool = False, level: str | int = "INFO", json_logs: bool = True
) -> None:
    """Configure structured logging for geodoc.

    Args:
        testing: Whether the process is running under the test suite
        level: Minimum level to emit, by name or number
        json_logs: Render JSON lines; otherwise use the console renderer
    """
    numeric_level = resolve_level(level)
    use_json = json_logs and not testing

    # Configure root logger
    root_logger: Logger = getLogger()
    root_logger.setLevel(numeric_level)

    # Create and configure package logger
    package_logger: Logger = getLogger("geodoc")
    package_logger.setLevel(numeric_level)

    # Create handler
    handler: Handler = StreamHandler()
    handler.setLevel(numeric_level)

    # Define shared processors
    shared_processors = [
        stdlib.add_logger_name,
        stdlib.add_log_level,
        stdlib.PositionalArgumentsFormatter(),
        TimeStamper(fmt="%Y-%m-%d %H:%M:%S.%f"),
        dict_tracebacks,
    ]

    # Configure structlog
    structlog.configure(
        processors=[
            stdlib.filter_by_level,
            *shared_processors,
            processors.format_exc_info,
            JSONRenderer() if use_json else processors.KeyValueRenderer(),
        ],
        context_class=dict,
        logger_factory=stdlib.LoggerFactory(),
        wrapper_class=stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure handler formatter
    formatter = stdlib.ProcessorFormatter(
        processor=processors.JSONRenderer() if use_json else dev.ConsoleRenderer(),
        foreign_pre_chain=shared_processors,
    )
    handler.setFormatter(formatter)

    # Clear existing handlers to prevent duplicates
    root_logger.handlers = []
    package_logger.handlers = []

    root_logger.addHandler(handler)


def get_logger(module: str | None = None) -> BoundLogger:
    """Get a configured logger instance.

    Args:
        module: Optional module name bound to every event

    Returns:
        A structured logger instance.
    """
    logger = cast(BoundLogger, structlog.get_logger())
    if module:
        logger = logger.bind(module=module)
    return logger
