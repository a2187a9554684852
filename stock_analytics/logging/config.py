"""
Centralized logging configuration for the analytics core.

The core never configures logging on import; the host application calls
``configure_logging`` once. Until then structlog's defaults apply. Log calls
only observe, they never influence a result.

Every record emitted through the configured chain carries
``package="stock_analytics"`` and the subsystem it came from, so host logs
can be filtered down to analytics events. Floats in event dicts (strengths,
ratios, metric values) are rounded for readability; infinite sentinels such
as a zero-volatility Sharpe ratio are rendered as ``"inf"``/``"-inf"`` so the
JSON renderer stays valid.
"""
import logging
import math
import sys
from typing import Any, Optional

import structlog
from structlog.types import EventDict, FilteringBoundLogger, WrappedLogger

PACKAGE_NAME = "stock_analytics"


def add_package_context(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Tag the record with the package name."""
    event_dict.setdefault("package", PACKAGE_NAME)
    return event_dict


class MetricValueFormatter:
    """Round float fields and spell out non-finite ones."""

    def __init__(self, precision: int = 4) -> None:
        self.precision = precision

    def _format(self, value: Any) -> Any:
        if isinstance(value, float):
            if math.isnan(value):
                return "nan"
            if math.isinf(value):
                return "inf" if value > 0 else "-inf"
            return round(value, self.precision)
        return value

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        return {key: self._format(value) for key, value in event_dict.items()}


def configure_logging(
    level: str = "WARNING",
    analytics_level: Optional[str] = None,
    format_json: bool = False,
    include_timestamp: bool = True,
    float_precision: Optional[int] = 4,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the host application.

    Args:
        level: Root logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        analytics_level: Level for the ``stock_analytics`` logger tree only;
            defaults to ``level``. Lets a host keep its own logs quiet while
            tracing analysis runs, or the reverse.
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        float_precision: Digits float fields are rounded to; None keeps full precision
        extra_processors: Additional structlog processors, run before rendering
    """
    root_level = getattr(logging, level.upper())
    logging.basicConfig(
        level=root_level,
        stream=sys.stdout,
        format="%(message)s"
    )
    package_level = getattr(logging, analytics_level.upper()) if analytics_level else root_level
    logging.getLogger(PACKAGE_NAME).setLevel(package_level)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        add_package_context,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if float_precision is not None:
        processors.append(MetricValueFormatter(float_precision))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a structlog logger; ``name`` is the module's ``__name__``."""
    return structlog.get_logger(name)


def get_analysis_logger(name: str) -> FilteringBoundLogger:
    """Logger bound to the technical analysis subsystem."""
    return get_logger(name).bind(subsystem="technical_analysis")


def get_portfolio_logger(name: str) -> FilteringBoundLogger:
    """Logger bound to the portfolio metrics subsystem."""
    return get_logger(name).bind(subsystem="portfolio_metrics")
