"""Optional metrics collection for operational visibility.

Provides Prometheus metrics for the DKT index MCP server. Metrics are
disabled by default and can be enabled via environment variable.

Usage:
    # Enable metrics:
    export DKT_METRICS_ENABLED=true

    # In code:
    from dkt_mcp.metrics import track_request

    with track_request("analyze_stats_files"):
        result = run_analysis(lh, rh)

Metrics exported:
    - dkt_request_duration_seconds: Histogram of tool call durations
    - dkt_request_total: Counter of tool calls by operation and status
    - dkt_region_coverage: Gauge of the last realized region coverage per index
    - dkt_poisoned_index_total: Counter of indices scored NaN
"""

import logging
import os
import time
from collections.abc import Generator
from contextlib import contextmanager

logger = logging.getLogger("dkt-mcp")

METRICS_ENABLED = os.environ.get("DKT_METRICS_ENABLED", "").lower() == "true"


class NullMetric:
    """Null object standing in for a Prometheus metric when metrics are disabled."""

    def labels(self, *args, **kwargs) -> "NullMetric":
        return self

    def inc(self, amount: float = 1) -> None:
        pass

    def set(self, value: float) -> None:
        pass

    def observe(self, value: float) -> None:
        pass


if METRICS_ENABLED:
    from prometheus_client import Counter, Gauge, Histogram

    logger.info("Metrics collection enabled (prometheus_client)")

    REQUEST_DURATION = Histogram(
        "dkt_request_duration_seconds",
        "Tool call duration in seconds",
        ["operation"],
        buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
    )

    REQUEST_TOTAL = Counter("dkt_request_total", "Total tool calls", ["operation", "status"])

    REGION_COVERAGE = Gauge(
        "dkt_region_coverage",
        "Fraction of configured regions present in both hemispheres (last analysis)",
        ["index"],
    )

    POISONED_INDEX_TOTAL = Counter(
        "dkt_poisoned_index_total", "Indices whose score was NaN", ["index"]
    )

else:
    REQUEST_DURATION = NullMetric()
    REQUEST_TOTAL = NullMetric()
    REGION_COVERAGE = NullMetric()
    POISONED_INDEX_TOTAL = NullMetric()


@contextmanager
def track_request(operation: str) -> Generator[None, None, None]:
    """Context manager to track tool call duration and status.

    Args:
        operation: Name of the operation being tracked (e.g., "parse_stats_file")

    Yields:
        None
    """
    start_time = time.perf_counter()
    status = "success"

    try:
        yield
    except Exception:
        status = "error"
        raise
    finally:
        duration = time.perf_counter() - start_time
        REQUEST_DURATION.labels(operation=operation).observe(duration)
        REQUEST_TOTAL.labels(operation=operation, status=status).inc()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Metric: {operation} {status} in {duration:.3f}s")


def record_region_coverage(index_name: str, coverage: float) -> None:
    REGION_COVERAGE.labels(index=index_name).set(coverage)


def record_poisoned_index(index_name: str) -> None:
    POISONED_INDEX_TOTAL.labels(index=index_name).inc()


def is_metrics_enabled() -> bool:
    """Check if metrics collection is enabled."""
    return METRICS_ENABLED
