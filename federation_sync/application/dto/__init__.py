"""Event DTOs."""

from federation_sync.application.dto.events import (
    AvatarUpdateEvent,
    TypingEvent,
    TypingUser,
)

__all__ = ["AvatarUpdateEvent", "TypingEvent", "TypingUser"]
