"""
ENTITIES - Federation objects with identity

- FederatedUser: identified by its external id, optionally linked to a local account
- FederatedRoom: identified by its external id, owned by a FederatedUser

Pure Python dataclasses (no ORM, no Pydantic). Entities are built per event
and never cached.
"""

from federation_sync.domain.entities.federated_user import FederatedUser
from federation_sync.domain.entities.federated_room import FederatedRoom

__all__ = [
    "FederatedUser",
    "FederatedRoom",
]
