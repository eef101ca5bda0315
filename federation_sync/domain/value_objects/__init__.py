"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass or enum)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from federation_sync.domain.value_objects.room_type import RoomType
from federation_sync.domain.value_objects.avatar_file import AvatarFile
from federation_sync.domain.value_objects.avatar_metadata import AvatarMetadata
from federation_sync.domain.value_objects.local_user_reference import (
    LocalUserReference,
)

__all__ = [
    "RoomType",
    "AvatarFile",
    "AvatarMetadata",
    "LocalUserReference",
]
