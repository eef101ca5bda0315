"""Federation Event Listener - Event intake for the federation sender.

Subscribes to internal events on the bus, validates their payloads and hands
them to UserFederationSender. This is the only place where infrastructure
failures are logged; they are re-raised so the bus can redeliver the event.
"""

import logging
import uuid
from typing import Any, Awaitable, Dict

from pydantic import ValidationError

from federation_sync.application.common.pipeline import PipelineOutcome
from federation_sync.application.dto.events import AvatarUpdateEvent, TypingEvent
from federation_sync.application.services.user_federation_sender import (
    UserFederationSender,
)
from federation_sync.config.logging_config import correlation_id_var
from federation_sync.domain.exceptions import FederationInfrastructureError
from federation_sync.infrastructure.events.in_process_event_bus import (
    InProcessEventBus,
)
from federation_sync.observability import EventOutcome, increment_event

logger = logging.getLogger(__name__)

AVATAR_UPDATE_EVENT = "user.avatarUpdate"
TYPING_EVENT = "user.typing"


class FederationEventListener:
    def __init__(self, sender: UserFederationSender):
        self._sender = sender

    def register(self, bus: InProcessEventBus) -> None:
        bus.subscribe(AVATAR_UPDATE_EVENT, self.on_avatar_update)
        bus.subscribe(TYPING_EVENT, self.on_typing)

    async def on_avatar_update(self, payload: Dict[str, Any]) -> None:
        correlation_id_var.set(uuid.uuid4().hex)
        try:
            event = AvatarUpdateEvent.model_validate(payload)
        except ValidationError as e:
            self._reject(AVATAR_UPDATE_EVENT, e)
            return

        if not event.username:
            increment_event(AVATAR_UPDATE_EVENT, EventOutcome.IGNORED)
            return

        await self._dispatch(
            AVATAR_UPDATE_EVENT, self._sender.after_avatar_changed(event.username)
        )

    async def on_typing(self, payload: Dict[str, Any]) -> None:
        correlation_id_var.set(uuid.uuid4().hex)
        try:
            event = TypingEvent.model_validate(payload)
        except ValidationError as e:
            self._reject(TYPING_EVENT, e)
            return

        if not event.room_id or not event.user.username:
            increment_event(TYPING_EVENT, EventOutcome.IGNORED)
            return

        await self._dispatch(
            TYPING_EVENT,
            self._sender.on_typing(event.user.username, event.room_id, event.is_typing),
        )

    async def _dispatch(
        self, event_name: str, use_case: Awaitable[PipelineOutcome]
    ) -> None:
        try:
            outcome = await use_case
        except FederationInfrastructureError:
            logger.exception("Federating %s failed", event_name)
            increment_event(event_name, EventOutcome.FAILED)
            raise

        increment_event(
            event_name,
            EventOutcome.COMPLETED if outcome.is_completed else EventOutcome.HALTED,
        )

    @staticmethod
    def _reject(event_name: str, error: ValidationError) -> None:
        logger.warning("Dropping malformed %s payload: %s", event_name, error)
        increment_event(event_name, EventOutcome.INVALID)
