"""
FastAPI Application Factory.

The service itself is driven by internal events; HTTP only exposes /health
and /metrics. The lifespan opens the DI container, which subscribes the
federation listener to the event bus, and closes it on shutdown.
"""

import logging
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI

from federation_sync.infrastructure.events import InProcessEventBus
from federation_sync.presentation.api import health_router, metrics_router

logger = logging.getLogger(__name__)


def create_fastapi_app(container: AsyncContainer = None) -> FastAPI:
    """
    Application factory.

    Args:
        container: DI container (default: federation_sync.setup.ioc.create_container())

    Returns:
        FastAPI application instance; the event bus is available as
        app.state.event_bus once the app has started
    """
    if container is None:
        from federation_sync.setup.ioc import create_container

        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.event_bus = await container.get(InProcessEventBus)
        logger.info("Federation listener subscribed to the event bus.")
        yield
        await app.state.event_bus.drain()
        await container.close()
        logger.info("DI container closed.")

    app = FastAPI(
        title="Federation Sync",
        description="Mirrors local user activity onto the Matrix federation",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.include_router(health_router)
    app.include_router(metrics_router)
    return app
