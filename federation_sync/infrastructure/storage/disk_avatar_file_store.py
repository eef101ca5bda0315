"""
DiskAvatarFileStore - Implements AvatarFileStore.

Avatar metadata (content type, file name, storage path) lives in the
`avatars` collection; the bytes live on disk under Config.AVATAR_STORAGE_PATH.

Absence:
- No avatar record, missing file, or empty file → None
- Record missing content_type or file_name → metadata None

Failures:
- Database or disk errors → FileStoreUnavailableError
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from prisma.errors import PrismaError

from federation_sync.domain.exceptions import FileStoreUnavailableError
from federation_sync.domain.ports.avatar_file_store import AvatarFileStore
from federation_sync.domain.value_objects.avatar_file import AvatarFile
from federation_sync.domain.value_objects.avatar_metadata import AvatarMetadata
from federation_sync.infrastructure.storage.file_storage_service import (
    FileStorageService,
)

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


class DiskAvatarFileStore(AvatarFileStore):
    _prisma: Prisma

    def __init__(self, prisma: Prisma, storage: FileStorageService):
        self._prisma = prisma
        self._storage = storage

    async def _find_record(self, internal_user_id: str):
        try:
            return await self._prisma.avatar.find_unique(
                where={"user_id": internal_user_id}
            )
        except PrismaError as e:
            raise FileStoreUnavailableError(
                f"Looking up avatar of {internal_user_id} failed: {e}"
            ) from e

    async def get_buffer(self, internal_user_id: str) -> Optional[AvatarFile]:
        record = await self._find_record(internal_user_id)
        if record is None:
            return None

        try:
            content = await asyncio.to_thread(
                self._storage.read_file, record.storage_path
            )
        except FileNotFoundError:
            logger.info(
                "Avatar file for %s is missing at %s", internal_user_id, record.storage_path
            )
            return None
        except (OSError, ValueError) as e:
            raise FileStoreUnavailableError(
                f"Reading avatar of {internal_user_id} failed: {e}"
            ) from e

        if not content:
            return None
        return AvatarFile(content)

    async def get_metadata(self, internal_user_id: str) -> Optional[AvatarMetadata]:
        record = await self._find_record(internal_user_id)
        if record is None:
            return None

        metadata = AvatarMetadata(
            content_type=record.content_type, file_name=record.file_name
        )
        if not metadata.is_complete():
            return None
        return metadata
