"""
Prometheus Metrics for the federation sync service.

DEPENDENCY:
    pip install prometheus-client

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ───────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus ──► Grafana

METRIC TYPES:
    - Counter: Value only goes up (events handled, pipeline halts)
    - Histogram: Distribution (bridge call latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
FEDERATION_EVENTS_TOTAL = Counter(
    "federation_events_total",
    "Internal events handled by the federation listener",
    ["event", "outcome"],
)

PIPELINE_HALTS_TOTAL = Counter(
    "federation_pipeline_halts_total",
    "Use case pipelines that stopped early on a guard",
    ["use_case", "reason"],
)

BRIDGE_LATENCY = Histogram(
    "federation_bridge_latency_seconds",
    "Latency of calls to the federated network in seconds",
    ["operation"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10],
)


# =============================================================================
# LABEL CONSTANTS
# =============================================================================
class EventOutcome:
    """Outcome labels for federation_events_total."""

    COMPLETED = "completed"
    HALTED = "halted"
    IGNORED = "ignored"
    INVALID = "invalid"
    FAILED = "failed"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def increment_event(event: str, outcome: str):
    """Integration point: presentation/listeners/federation_listener.py"""
    FEDERATION_EVENTS_TOTAL.labels(event=event, outcome=outcome).inc()


def increment_pipeline_halt(use_case: str, reason: str):
    """Integration point: application/services/user_federation_sender.py"""
    PIPELINE_HALTS_TOTAL.labels(use_case=use_case, reason=reason).inc()


def observe_bridge_latency(operation: str, duration: float):
    """Integration point: infrastructure/matrix/matrix_bridge.py"""
    BRIDGE_LATENCY.labels(operation=operation).observe(duration)


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "increment_event",
    "increment_pipeline_halt",
    "observe_bridge_latency",
    "get_metrics_content",
    "EventOutcome",
]
