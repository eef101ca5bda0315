"""
DIRECTORY PORTS - Local state lookups

Each directory port:
- Is an abstract base class (ABC)
- Returns None when nothing matches (absence is not an error)
- Raises DirectoryUnavailableError when the store itself fails
"""

from federation_sync.domain.ports.directories.user_directory import UserDirectory
from federation_sync.domain.ports.directories.room_directory import RoomDirectory

__all__ = [
    "UserDirectory",
    "RoomDirectory",
]
