"""
DirectoryUnavailableError - The local user/room store failed.
"""

from federation_sync.domain.exceptions.infrastructure_unavailable import (
    FederationInfrastructureError,
)


class DirectoryUnavailableError(FederationInfrastructureError):
    """Raised by UserDirectory / RoomDirectory implementations."""

    def __init__(self, message: str = "Directory unavailable"):
        super().__init__(message)
