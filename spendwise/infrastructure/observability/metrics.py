"""Prometheus metrics for dashboard computations, cycle health and bill reminders"""

from prometheus_client import Counter, Histogram

# Dashboard metrics
dashboard_counter = Counter(
    "spendwise_dashboard_total",
    "Total dashboard computations",
    ["outcome"],  # ok | storage_error | invalid_input | error
)

degenerate_cycle_counter = Counter(
    "spendwise_degenerate_cycle_total",
    "Billing cycles that could not be computed",
)

# Bill metrics
active_reminders_histogram = Histogram(
    "spendwise_active_reminders",
    "Bills per request whose reminder date has arrived",
    buckets=[0, 1, 2, 3, 5, 10, 20],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_dashboard(outcome: str, degenerate_cycle: bool = False) -> None:
    """Record dashboard outcome and flag cycles that fell back to the degenerate range"""
    dashboard_counter.labels(outcome=outcome).inc()
    if degenerate_cycle:
        degenerate_cycle_counter.inc()


def record_active_reminders(count: int) -> None:
    active_reminders_histogram.observe(count)
