"""
Prisma Room Directory - Implements RoomDirectory over the local `rooms` collection.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from prisma.errors import PrismaError

from federation_sync.domain.entities.federated_room import FederatedRoom
from federation_sync.domain.exceptions import DirectoryUnavailableError
from federation_sync.domain.ports.directories.room_directory import RoomDirectory
from federation_sync.domain.value_objects.room_type import RoomType
from federation_sync.infrastructure.persistence.prisma_user_directory import (
    to_federated_user,
)

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


class PrismaRoomDirectory(RoomDirectory):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record) -> FederatedRoom:
        """Map Prisma record to domain entity."""
        return FederatedRoom.create_instance(
            external_id=record.external_id,
            internal_id=record.id,
            owner=to_federated_user(record.creator),
            room_type=RoomType.from_code(record.room_type),
            display_name=record.name,
        )

    async def find_by_internal_id(self, room_id: str) -> Optional[FederatedRoom]:
        try:
            record = await self._prisma.room.find_unique(
                where={"id": room_id},
                include={"creator": True},
            )
        except PrismaError as e:
            raise DirectoryUnavailableError(f"Looking up room {room_id} failed: {e}") from e

        # Rooms without an external id are not bridged
        if record is None or not record.external_id:
            return None
        if not RoomType.is_known(record.room_type):
            logger.info(
                "Room %s has unsupported type %r; not federated", room_id, record.room_type
            )
            return None
        return self._to_entity(record)
