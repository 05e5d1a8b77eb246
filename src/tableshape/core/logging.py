"""Structured logging for profiling runs.

Usage:
    from tableshape.core.logging import get_logger, configure_logging

    # Configure at startup
    configure_logging(log_level="INFO", log_format="console")

    # Get logger in any module
    logger = get_logger(__name__)

    # Log with structured context
    logger.info("component_capped", component="association_matrix", columns=60)

    # Use context managers for automatic context propagation
    with log_context(dataset="customers"):
        summary = profile(records)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, cast

import structlog
from structlog.typing import FilteringBoundLogger

from tableshape.core.config import Settings, get_settings

# Context variables for correlation
_run_context: ContextVar[dict[str, Any] | None] = ContextVar("run_context", default=None)


@dataclass
class ProfileMetrics:
    """Metrics collected during one profiling call."""

    profile_id: str
    start_time: datetime = field(default_factory=lambda: datetime.now(UTC))
    end_time: datetime | None = None

    rows_processed: int = 0
    columns_processed: int = 0

    # Component timings (seconds)
    timings: dict[str, float] = field(default_factory=dict)
    capped_components: list[str] = field(default_factory=list)

    @property
    def duration_seconds(self) -> float:
        """Get duration in seconds."""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return (datetime.now(UTC) - self.start_time).total_seconds()

    def record_timing(self, operation: str, seconds: float) -> None:
        """Record timing for a component."""
        self.timings[operation] = self.timings.get(operation, 0.0) + seconds

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "profile_id": self.profile_id,
            "duration_seconds": self.duration_seconds,
            "rows_processed": self.rows_processed,
            "columns_processed": self.columns_processed,
            "timings": self.timings,
            "capped_components": self.capped_components,
        }

    def get_slowest_components(self, n: int = 3) -> list[tuple[str, float]]:
        """Get the N slowest components."""
        return sorted(self.timings.items(), key=lambda x: x[1], reverse=True)[:n]


# Metrics storage (per-call)
_current_metrics: ContextVar[ProfileMetrics | None] = ContextVar("current_metrics", default=None)


def start_profile_metrics(profile_id: str) -> ProfileMetrics:
    """Start collecting metrics for a profiling call."""
    metrics = ProfileMetrics(profile_id=profile_id)
    _current_metrics.set(metrics)
    return metrics


def get_profile_metrics() -> ProfileMetrics | None:
    """Get current profile metrics."""
    return _current_metrics.get()


def end_profile_metrics() -> ProfileMetrics | None:
    """End profile metrics collection."""
    metrics = _current_metrics.get()
    if metrics:
        metrics.end_time = datetime.now(UTC)
        _current_metrics.set(None)
    return metrics


def _add_run_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Processor to add run context to log events."""
    context = _run_context.get()
    if context:
        event_dict.update(context)
    return event_dict


def _add_metrics_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Processor to add the current profile id."""
    metrics = _current_metrics.get()
    if metrics:
        event_dict["_profile_id"] = metrics.profile_id
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    show_timestamps: bool = True,
    color: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Output format ("console" for development, "json" for production/cloud)
        show_timestamps: Whether to show timestamps in console mode
        color: Whether to use colors in console mode
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _add_run_context,
        _add_metrics_context,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if show_timestamps:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso", utc=True))

    if log_format == "json":
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(
                colors=color,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Bound structlog logger
    """
    return cast(FilteringBoundLogger, structlog.get_logger(name))


class LogContext:
    """Context manager for adding context to logs within a scope."""

    def __init__(self, **context: Any):
        """Initialize with context key-value pairs."""
        self.context = context
        self.token: Any = None

    def __enter__(self) -> LogContext:
        """Enter context, adding values to log context."""
        current = _run_context.get() or {}
        new_context = {**current, **self.context}
        self.token = _run_context.set(new_context)
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context, restoring previous values."""
        if self.token:
            _run_context.reset(self.token)


def log_context(**context: Any) -> LogContext:
    """Create a context manager for scoped logging context.

    Usage:
        with log_context(dataset="orders"):
            logger.info("processing")  # Will include dataset
    """
    return LogContext(**context)


def record_operation_timing(operation: str, seconds: float) -> None:
    """Record timing for a component in the current profile metrics."""
    metrics = _current_metrics.get()
    if metrics:
        metrics.record_timing(operation, seconds)


def record_capped_component(component: str) -> None:
    """Note that a component hit its column cap in the current profile metrics."""
    metrics = _current_metrics.get()
    if metrics:
        metrics.capped_components.append(component)


def configure_from_settings(settings: Settings | None = None) -> None:
    """Configure logging from the TABLESHAPE_LOG_LEVEL / TABLESHAPE_LOG_FORMAT settings."""
    settings = settings or get_settings()
    configure_logging(log_level=settings.log_level, log_format=settings.log_format)


# Initialize from settings
configure_from_settings()
