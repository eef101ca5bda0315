"""Observability package for the federation sync service."""

from federation_sync.observability.metrics import (
    increment_event,
    increment_pipeline_halt,
    observe_bridge_latency,
    get_metrics_content,
    EventOutcome,
)

__all__ = [
    "increment_event",
    "increment_pipeline_halt",
    "observe_bridge_latency",
    "get_metrics_content",
    "EventOutcome",
]
