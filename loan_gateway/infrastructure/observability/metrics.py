"""Prometheus metrics for monitoring approval rates and offered loans"""

from prometheus_client import Counter, Histogram

from loan_gateway.domain.models import LoanDecision

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | invalid_personal_code | ... | no_valid_loan
)

approved_amount_histogram = Histogram(
    "loan_approved_amount",
    "Approved loan amounts in EUR",
    buckets=[2000, 3000, 4000, 5000, 6000, 8000, 10000],
)

approved_period_histogram = Histogram(
    "loan_approved_period",
    "Approved loan periods in months",
    buckets=[12, 18, 24, 36, 48, 60],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(decision: LoanDecision) -> None:
    """Record decision metrics for monitoring approval rates and offer distribution"""
    if not decision.approved:
        decision_counter.labels(outcome=decision.failure_kind.value).inc()
        return

    decision_counter.labels(outcome="approved").inc()
    approved_amount_histogram.observe(decision.approved_amount)
    approved_period_histogram.observe(decision.approved_period)
