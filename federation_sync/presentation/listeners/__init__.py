from federation_sync.presentation.listeners.federation_listener import (
    AVATAR_UPDATE_EVENT,
    TYPING_EVENT,
    FederationEventListener,
)

__all__ = ["AVATAR_UPDATE_EVENT", "TYPING_EVENT", "FederationEventListener"]
