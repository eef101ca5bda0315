"""
In-process event bus.

- Topic based publish/subscribe for internal events (`user.avatarUpdate`, `user.typing`)
- Each delivery runs as its own asyncio task; there is no ordering across topics
- At-least-once: a handler failing with FederationInfrastructureError is
  redelivered up to `max_delivery_attempts` times. Other handler errors are
  logged and not redelivered.
"""

import asyncio
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List, Set

from federation_sync.config.settings import Config
from federation_sync.domain.exceptions import FederationInfrastructureError

logger = logging.getLogger(__name__)

EventHandler = Callable[[Dict[str, Any]], Awaitable[None]]


class InProcessEventBus:
    def __init__(self, max_delivery_attempts: int = None):
        self._subscribers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._max_delivery_attempts = max(
            1, max_delivery_attempts or Config.EVENT_MAX_DELIVERY_ATTEMPTS
        )
        self._pending: Set[asyncio.Task] = set()

    def subscribe(self, topic: str, handler: EventHandler) -> None:
        self._subscribers[topic].append(handler)

    def subscribers(self, topic: str) -> List[EventHandler]:
        return list(self._subscribers.get(topic, []))

    def publish(self, topic: str, payload: Dict[str, Any]) -> List[asyncio.Task]:
        """Schedule delivery of payload to every subscriber of topic. Must run inside a loop."""
        handlers = self._subscribers.get(topic, [])
        if not handlers:
            logger.debug("No subscribers for %s", topic)
            return []

        tasks = []
        for handler in handlers:
            task = asyncio.create_task(self._deliver(topic, handler, dict(payload)))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)
            tasks.append(task)
        return tasks

    async def drain(self) -> None:
        """Wait for every in-flight delivery."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    async def _deliver(
        self, topic: str, handler: EventHandler, payload: Dict[str, Any]
    ) -> None:
        for attempt in range(1, self._max_delivery_attempts + 1):
            try:
                await handler(payload)
                return
            except FederationInfrastructureError as e:
                if attempt >= self._max_delivery_attempts:
                    logger.error(
                        "Dropping %s after %d attempts: %s", topic, attempt, e
                    )
                    return
                logger.warning(
                    "Redelivering %s (attempt %d/%d): %s",
                    topic,
                    attempt + 1,
                    self._max_delivery_attempts,
                    e,
                )
            except Exception:
                logger.exception("Handler for %s failed; not redelivered", topic)
                return
