"""Prometheus metrics for monitoring report outcomes and portal performance"""

from decimal import Decimal

from prometheus_client import Counter, Histogram, Gauge

# Report metrics
report_counter = Counter(
    "meal_topup_reports_total",
    "Total balance reports generated",
    ["outcome"],  # success | failure
)

topup_needed_gauge = Gauge(
    "meal_topup_topup_needed",
    "Top-up amount from the most recent report (negative means surplus)",
)

weekdays_until_payday_gauge = Gauge(
    "meal_topup_weekdays_until_payday",
    "Weekdays left until the next payday at the most recent report",
)

# Account portal metrics
portal_fetch_latency_histogram = Histogram(
    "portal_fetch_latency_seconds",
    "Account portal balance fetch time",
    buckets=[1.0, 2.5, 5.0, 10.0, 20.0, 30.0, 60.0],
)

portal_fetch_failures_counter = Counter(
    "portal_fetch_failures_total",
    "Failed account portal balance fetches",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_report(weekdays_until_payday: int, topup_needed: Decimal) -> None:
    """Record a successful report for monitoring"""
    report_counter.labels(outcome="success").inc()
    weekdays_until_payday_gauge.set(weekdays_until_payday)
    topup_needed_gauge.set(float(topup_needed))


def record_report_failure() -> None:
    report_counter.labels(outcome="failure").inc()
