"""Prometheus metrics for billing cycle, installment and recurrence calculations"""

from prometheus_client import Counter, Histogram

# Billing metrics
billing_cycle_counter = Counter(
    "cardcycle_billing_cycle_total",
    "Billing cycles resolved",
    ["rollover"],  # same_month | next_month
)

installment_plan_counter = Counter(
    "cardcycle_installment_plan_total",
    "Installment plans generated by size bucket",
    ["bucket"],  # 1x, 2-6x, 7-12x, 13x+
)

# Recurrence metrics
recurrence_counter = Counter(
    "cardcycle_recurrence_total",
    "Recurrence dates computed",
    ["pattern"],
)

# Errors
domain_error_counter = Counter(
    "cardcycle_domain_errors_total",
    "Domain errors surfaced to callers",
    ["error"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_billing_cycle(purchase_month: int, statement_month: int) -> None:
    """Record whether a purchase rolled over to the next statement"""
    rollover = "same_month" if purchase_month == statement_month else "next_month"
    billing_cycle_counter.labels(rollover=rollover).inc()


def record_installment_plan(installment_count: int) -> None:
    """Record installment plan size for distribution analysis"""
    if installment_count == 1:
        bucket = "1x"
    elif installment_count <= 6:
        bucket = "2-6x"
    elif installment_count <= 12:
        bucket = "7-12x"
    else:
        bucket = "13x+"

    installment_plan_counter.labels(bucket=bucket).inc()


def record_recurrence(pattern: str | None) -> None:
    """Record recurrence computation by requested pattern"""
    recurrence_counter.labels(pattern=pattern or "monthly").inc()
