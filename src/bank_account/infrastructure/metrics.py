import time
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar

import structlog
from prometheus_client import Counter, Histogram, start_http_server


logger = structlog.get_logger()

ACCOUNT_OPERATIONS_TOTAL = Counter(
    "account_operations_total",
    "Total number of account operations",
    ["operation", "status"],
)

BALANCE_SYNC_TOTAL = Counter(
    "balance_sync_total",
    "Total number of balance synchronizations",
    ["outcome"],
)

BALANCE_SYNC_DURATION_SECONDS = Histogram(
    "balance_sync_duration_seconds",
    "Balance synchronization duration",
    buckets=[0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


P = ParamSpec("P")
R = TypeVar("R")


def track_sync_duration(
    func: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start = time.perf_counter()
        try:
            return await func(*args, **kwargs)
        finally:
            duration = time.perf_counter() - start
            BALANCE_SYNC_DURATION_SECONDS.observe(duration)

    return wrapper


def start_metrics_server(host: str = "0.0.0.0", port: int = 9090) -> None:
    """Expose the default registry on ``http://host:port/metrics`` from a daemon thread."""
    start_http_server(port, addr=host)
    logger.info("metrics_server_started", host=host, port=port)
