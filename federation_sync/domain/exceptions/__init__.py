"""
DOMAIN EXCEPTIONS

- PreconditionError: an entity was asked for state it does not carry
- FederationInfrastructureError and subclasses: a port or the bridge failed

Business absence (user not found, setting disabled, upload rejected) is
NOT an exception. Use cases report it as a halted pipeline outcome.
"""

from federation_sync.domain.exceptions.precondition_error import PreconditionError
from federation_sync.domain.exceptions.infrastructure_unavailable import (
    FederationInfrastructureError,
)
from federation_sync.domain.exceptions.bridge_unavailable import BridgeUnavailableError
from federation_sync.domain.exceptions.directory_unavailable import (
    DirectoryUnavailableError,
)
from federation_sync.domain.exceptions.file_store_unavailable import (
    FileStoreUnavailableError,
)

__all__ = [
    "PreconditionError",
    "FederationInfrastructureError",
    "BridgeUnavailableError",
    "DirectoryUnavailableError",
    "FileStoreUnavailableError",
]
