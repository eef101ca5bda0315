"""
Avatar File Store Port - Interface for reading a local user's avatar.
Implementation: federation_sync/infrastructure/storage/disk_avatar_file_store.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from federation_sync.domain.value_objects.avatar_file import AvatarFile
from federation_sync.domain.value_objects.avatar_metadata import AvatarMetadata


class AvatarFileStore(ABC):
    @abstractmethod
    async def get_buffer(self, internal_user_id: str) -> Optional[AvatarFile]: ...

    @abstractmethod
    async def get_metadata(self, internal_user_id: str) -> Optional[AvatarMetadata]:
        """Return None unless both content type and file name are known."""
        ...
