"""
Persistence Layer - Directory implementations.

Contains Prisma implementations of the directory ports.
"""

from federation_sync.infrastructure.persistence.prisma_user_directory import (
    PrismaUserDirectory,
)
from federation_sync.infrastructure.persistence.prisma_room_directory import (
    PrismaRoomDirectory,
)

__all__ = [
    "PrismaUserDirectory",
    "PrismaRoomDirectory",
]
