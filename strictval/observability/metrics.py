"""
Prometheus metrics collection for strictval

Counts validation runs and rule failures, and times each run. Metrics live on
a private registry so that embedding applications choose whether to expose them.
"""
from typing import Optional

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# VALIDATION METRICS
# =======================

# Validation runs counter
runs_total = Counter(
    name="strictval_runs_total",
    documentation="Total number of validation runs",
    labelnames=["result"],  # result: passed, failed
    registry=REGISTRY,
)

# Rule failures counter
rule_failures_total = Counter(
    name="strictval_rule_failures_total",
    documentation="Total number of failed rule evaluations",
    labelnames=["rule"],
    registry=REGISTRY,
)

# Run duration histogram
run_duration_seconds = Histogram(
    name="strictval_run_duration_seconds",
    documentation="Time spent validating one input set in seconds",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def record_run(passed: bool, duration_seconds: float, failed_rules: list[str]) -> None:
    """
    Record one validation run.

    Args:
        passed: Overall result of the run
        duration_seconds: Wall time spent in RuleEngine.run()
        failed_rules: Names of every failed rule across all fields
    """
    increment_counter(runs_total, 1, result="passed" if passed else "failed")
    run_duration_seconds.observe(duration_seconds)
    for rule in failed_rules:
        increment_counter(rule_failures_total, 1, rule=rule)


def get_sample_value(name: str, labels: Optional[dict] = None) -> Optional[float]:
    """Read a single sample from the registry (for tests and health checks)."""
    return REGISTRY.get_sample_value(name, labels or {})
