"""
FileStorageService - Pure disk reads for stored avatar files.

This service handles the file system side of avatar storage:
- Resolve a stored path under the avatar base directory
- Read file bytes

This is a SYNC service - no database, no async.
For coordinated operations (disk + DB), use DiskAvatarFileStore.
"""

import os
import logging

from federation_sync.config.settings import Config

logger = logging.getLogger(__name__)


class FileStorageService:
    """
    Read-only file system operations under a base directory.

    All methods are synchronous since file I/O in Python is sync. Async
    callers run them with asyncio.to_thread.
    """

    def __init__(self, base_dir: str = None):
        """
        Args:
            base_dir: Base directory for avatars (default: Config.AVATAR_STORAGE_PATH)
        """
        self.base_dir = os.path.abspath(base_dir or Config.AVATAR_STORAGE_PATH)

    def resolve(self, storage_path: str) -> str:
        """
        Resolve a stored path against the base directory.

        Raises:
            ValueError: If the path escapes the base directory
        """
        full_path = os.path.abspath(os.path.join(self.base_dir, storage_path))
        if os.path.commonpath([self.base_dir, full_path]) != self.base_dir:
            raise ValueError(f"Path escapes storage directory: {storage_path}")
        return full_path

    def read_file(self, storage_path: str) -> bytes:
        """
        Read file content from disk.

        Args:
            storage_path: Path relative to the base directory

        Returns:
            File content as bytes

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        file_path = self.resolve(storage_path)
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, "rb") as f:
            content = f.read()

        logger.debug(f"[FileStorage] Read file: {file_path} ({len(content)} bytes)")
        return content
