"""Application services."""

from federation_sync.application.services.user_federation_sender import (
    UserFederationSender,
)

__all__ = ["UserFederationSender"]
