"""
Room Directory Port - Interface for reading federated rooms from the local store.
Implementation: federation_sync/infrastructure/persistence/prisma_room_directory.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from federation_sync.domain.entities.federated_room import FederatedRoom


class RoomDirectory(ABC):
    @abstractmethod
    async def find_by_internal_id(self, room_id: str) -> Optional[FederatedRoom]: ...
