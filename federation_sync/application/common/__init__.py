"""Shared application primitives."""

from federation_sync.application.common.pipeline import (
    Guard,
    HaltReason,
    PipelineOutcome,
)

__all__ = ["Guard", "HaltReason", "PipelineOutcome"]
