"""
API Routers - Operational endpoints only.
"""

from federation_sync.presentation.api.health import router as health_router
from federation_sync.presentation.api.metrics import router as metrics_router

__all__ = [
    "health_router",
    "metrics_router",
]
