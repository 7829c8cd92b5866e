import time
from collections.abc import Callable
from functools import wraps

from prometheus_client import Counter, Histogram


PAYMENT_REQUESTS_TOTAL = Counter(
    "payment_authorization_requests_total",
    "Total number of payment authorization requests",
    ["status", "reason"],
)

REPOSITORY_ERRORS_TOTAL = Counter(
    "payment_authorization_repository_errors_total",
    "Total number of account store faults surfaced during authorization",
    ["operation"],
)

PAYMENT_DURATION_SECONDS = Histogram(
    "payment_authorization_duration_seconds",
    "Payment authorization duration",
    buckets=[0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)


def track_payment_duration[**P, R](
    func: Callable[P, R],
) -> Callable[P, R]:
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            duration = time.perf_counter() - start
            PAYMENT_DURATION_SECONDS.observe(duration)

    return wrapper
