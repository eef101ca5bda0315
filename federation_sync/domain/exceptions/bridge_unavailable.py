"""
BridgeUnavailableError - The federated network could not be reached or answered with an error.
"""

from federation_sync.domain.exceptions.infrastructure_unavailable import (
    FederationInfrastructureError,
)


class BridgeUnavailableError(FederationInfrastructureError):
    """Raised by FederationBridge implementations on network or protocol errors."""

    def __init__(self, message: str = "Federation bridge unavailable"):
        super().__init__(message)
