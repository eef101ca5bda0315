"""
FederatedRoom Entity - A room bridged to the federated network.
"""

from dataclasses import dataclass
from typing import Optional

from federation_sync.domain.entities.federated_user import FederatedUser
from federation_sync.domain.exceptions import PreconditionError
from federation_sync.domain.value_objects.room_type import RoomType


@dataclass
class FederatedRoom:
    external_id: str
    internal_id: str
    room_type: RoomType
    owner: Optional[FederatedUser] = None
    display_name: Optional[str] = None

    def __post_init__(self):
        if not self.external_id or not self.external_id.strip():
            raise ValueError("Federated room requires an external id")
        if not self.internal_id or not self.internal_id.strip():
            raise ValueError("Federated room requires an internal id")

    @classmethod
    def create_instance(
        cls,
        external_id: str,
        internal_id: str,
        owner: Optional[FederatedUser],
        room_type: RoomType,
        display_name: Optional[str] = None,
    ) -> "FederatedRoom":
        return cls(
            external_id=external_id,
            internal_id=internal_id,
            room_type=room_type,
            owner=owner,
            display_name=display_name,
        )

    @property
    def can_be_federated(self) -> bool:
        return self.owner is not None

    @property
    def creator_external_id(self) -> str:
        if self.owner is None:
            raise PreconditionError(f"Room {self.internal_id} has no owner")
        return self.owner.external_id

    def is_direct_message(self) -> bool:
        return self.room_type is RoomType.DIRECT_MESSAGE
