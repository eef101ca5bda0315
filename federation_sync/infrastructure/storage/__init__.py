"""
Storage Layer - Avatar file access.
"""

from federation_sync.infrastructure.storage.file_storage_service import (
    FileStorageService,
)
from federation_sync.infrastructure.storage.disk_avatar_file_store import (
    DiskAvatarFileStore,
)

__all__ = [
    "FileStorageService",
    "DiskAvatarFileStore",
]
