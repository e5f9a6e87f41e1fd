"""Prometheus metrics for loan, trading and production activity"""

from typing import Optional

from prometheus_client import Counter, Histogram

operation_counter = Counter(
    "empire_operation_total",
    "Game-economy operations by outcome",
    ["operation", "outcome", "reason"],  # outcome: accepted | rejected
)

loan_amount_bucket_counter = Counter(
    "empire_loan_amount_bucket",
    "Originated loans by amount bucket",
    ["bucket"],  # <$10K, $10K-$100K, $100K-$1M, $1M+
)

production_budget_histogram = Histogram(
    "empire_production_budget_dollars",
    "Budgets of started productions",
    ["project_type"],
    buckets=[1e5, 5e5, 1e6, 2e6, 1e7, 7.5e7, 3e8],
)

request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_operation(operation: str, accepted: bool, reason: Optional[str] = None) -> None:
    outcome = "accepted" if accepted else "rejected"
    operation_counter.labels(operation=operation, outcome=outcome, reason=reason or "none").inc()


def record_loan(amount: float) -> None:
    """Bucket originated loan amounts for distribution analysis"""
    if amount < 10_000:
        bucket = "<$10K"
    elif amount < 100_000:
        bucket = "$10K-$100K"
    elif amount < 1_000_000:
        bucket = "$100K-$1M"
    else:
        bucket = "$1M+"

    loan_amount_bucket_counter.labels(bucket=bucket).inc()
