"""
Presentation Layer - Entry points into the service.

This layer contains:
- listeners/: Event intake subscribing to the internal event bus
- api/: FastAPI routers for /health and /metrics
"""
