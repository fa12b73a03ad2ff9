"""
Centralized logging configuration for the dividend forecasting engine.

All modules log through structlog using this configuration so that clamping
decisions and solved plans produce consistent structured events.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for forecasting runs.

    Args:
        level: Logging level name
        format_json: Emit JSON lines instead of console output
        include_timestamp: Add an ISO timestamp to each event
        stream: Destination, defaults to stderr
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=stream or sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

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
    """
    return structlog.get_logger(name)


def get_solver_logger(name: str) -> FilteringBoundLogger:
    """Logger bound to the reverse-solver subsystem."""
    return get_logger(name).bind(subsystem="solver")


def log_input_clamped(
    logger: FilteringBoundLogger,
    field: str,
    supplied: Any,
    replacement: Any,
) -> None:
    """
    Record that a simulation input was replaced by its default.

    Args:
        logger: Structlog logger instance
        field: Name of the clamped input
        supplied: Value the caller passed
        replacement: Default used instead
    """
    logger.debug(
        "forecast_input_clamped",
        field=field,
        supplied=supplied,
        replacement=replacement,
    )


def log_plan_solved(
    logger: FilteringBoundLogger,
    branch: str,
    required_contribution: float,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Record the outcome of a reverse solve.

    Args:
        logger: Structlog logger instance
        branch: Solver branch that produced the result
        required_contribution: Lump sum or per-period amount
        context: Request fields to attach
    """
    bound_logger = logger.bind(
        branch=branch,
        required_contribution=required_contribution,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("plan_solved")
