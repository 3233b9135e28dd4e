"""
Centralized logging configuration for the funded hours engine.

This module provides standardized logging configuration using structlog
for all components. Calculators, the roster transitions and the engine
facade all log through loggers obtained here.
"""
import logging
import sys
from typing import IO, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[IO[str]] = None
) -> None:
    """
    Configure structlog for the entire application.

    Log output goes to stderr by default so quotations and reports
    printed on stdout stay readable. Calling this again replaces the
    previous configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        stream: Output stream, stderr if omitted
    """
    stream = stream or sys.stderr
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=stream,
        format="%(message)s",
        force=True,
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=False))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.MODULE,
                        structlog.processors.CallsiteParameter.FUNC_NAME]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        # Log context may hold dates and enum members
        processors.append(structlog.processors.JSONRenderer(default=str))
    else:
        colors = hasattr(stream, "isatty") and stream.isatty()
        processors.append(structlog.dev.ConsoleRenderer(colors=colors))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_advisor_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for optimisation advice.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for advisor output
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="advisor",
        audit_trail=True
    )


def get_roster_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for roster changes.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for roster transitions
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="roster",
        audit_trail=True
    )


def log_suggestion(
    logger: FilteringBoundLogger,
    kind: str,
    severity: str,
    child_id: Any,
    title: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log an emitted optimisation suggestion with standardized format.

    Args:
        logger: Structlog logger instance
        kind: Suggestion kind (under_utilisation, over_booking, stretching)
        severity: Suggestion severity
        child_id: ID of the child the suggestion concerns
        title: Suggestion title
        context: Computed figures behind the suggestion
    """
    bound_logger = logger.bind(
        suggestion_kind=kind,
        severity=severity,
        child_id=child_id,
        title=title,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if severity == "warning":
        bound_logger.warning("Suggestion emitted")
    else:
        bound_logger.info("Suggestion emitted")


def log_roster_change(
    logger: FilteringBoundLogger,
    action: str,
    child_id: Any,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a roster transition with standardized format.

    Args:
        logger: Structlog logger instance
        action: Name of the transition (add, remove, set_hours_used, ...)
        child_id: ID of the child affected
        context: Additional context data
    """
    bound_logger = logger.bind(
        action=action,
        child_id=child_id,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Roster changed")
