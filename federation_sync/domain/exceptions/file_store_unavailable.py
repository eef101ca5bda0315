"""
FileStoreUnavailableError - The avatar file store failed to read a file.
"""

from federation_sync.domain.exceptions.infrastructure_unavailable import (
    FederationInfrastructureError,
)


class FileStoreUnavailableError(FederationInfrastructureError):
    """Raised by AvatarFileStore implementations."""

    def __init__(self, message: str = "Avatar file store unavailable"):
        super().__init__(message)
