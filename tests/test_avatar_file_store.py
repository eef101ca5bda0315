"""
Unit tests for FileStorageService and DiskAvatarFileStore.

Files are written to pytest's tmp_path; the avatars collection is mocked.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from prisma.errors import PrismaError

from federation_sync.domain.exceptions import FileStoreUnavailableError
from federation_sync.infrastructure.storage import (
    DiskAvatarFileStore,
    FileStorageService,
)


@pytest.fixture()
def storage(tmp_path):
    (tmp_path / "u1").mkdir()
    (tmp_path / "u1" / "avatar.png").write_bytes(b"\x89PNG avatar")
    (tmp_path / "u1" / "empty.png").write_bytes(b"")
    return FileStorageService(str(tmp_path))


@pytest.fixture()
def prisma():
    client = MagicMock()
    client.avatar.find_unique = AsyncMock()
    return client


def avatar_record(storage_path="u1/avatar.png", content_type="image/png", file_name="avatar.png"):
    return SimpleNamespace(
        user_id="u1",
        storage_path=storage_path,
        content_type=content_type,
        file_name=file_name,
    )


class TestFileStorageService:
    """Disk reads under the avatar directory."""

    def test_read_file(self, storage):
        assert storage.read_file("u1/avatar.png") == b"\x89PNG avatar"

    def test_missing_file(self, storage):
        with pytest.raises(FileNotFoundError):
            storage.read_file("u1/other.png")

    def test_path_escape_rejected(self, storage):
        with pytest.raises(ValueError, match="escapes"):
            storage.resolve("../../etc/passwd")


class TestDiskAvatarFileStore:
    """Avatar bytes and metadata."""

    @pytest.mark.asyncio
    async def test_get_buffer(self, prisma, storage):
        prisma.avatar.find_unique.return_value = avatar_record()

        avatar = await DiskAvatarFileStore(prisma, storage).get_buffer("u1")

        prisma.avatar.find_unique.assert_awaited_once_with(where={"user_id": "u1"})
        assert avatar.content == b"\x89PNG avatar"

    @pytest.mark.asyncio
    async def test_no_avatar_record(self, prisma, storage):
        prisma.avatar.find_unique.return_value = None
        store = DiskAvatarFileStore(prisma, storage)

        assert await store.get_buffer("u1") is None
        assert await store.get_metadata("u1") is None

    @pytest.mark.asyncio
    async def test_missing_file_is_absent(self, prisma, storage):
        prisma.avatar.find_unique.return_value = avatar_record(storage_path="u1/gone.png")

        assert await DiskAvatarFileStore(prisma, storage).get_buffer("u1") is None

    @pytest.mark.asyncio
    async def test_empty_file_is_absent(self, prisma, storage):
        prisma.avatar.find_unique.return_value = avatar_record(storage_path="u1/empty.png")

        assert await DiskAvatarFileStore(prisma, storage).get_buffer("u1") is None

    @pytest.mark.asyncio
    async def test_escaping_path_is_a_store_failure(self, prisma, storage):
        prisma.avatar.find_unique.return_value = avatar_record(storage_path="../../x")

        with pytest.raises(FileStoreUnavailableError):
            await DiskAvatarFileStore(prisma, storage).get_buffer("u1")

    @pytest.mark.asyncio
    async def test_get_metadata(self, prisma, storage):
        prisma.avatar.find_unique.return_value = avatar_record()

        metadata = await DiskAvatarFileStore(prisma, storage).get_metadata("u1")

        assert metadata.content_type == "image/png"
        assert metadata.file_name == "avatar.png"

    @pytest.mark.asyncio
    async def test_incomplete_metadata_is_absent(self, prisma, storage):
        prisma.avatar.find_unique.return_value = avatar_record(content_type=None)

        assert await DiskAvatarFileStore(prisma, storage).get_metadata("u1") is None

    @pytest.mark.asyncio
    async def test_database_error_is_wrapped(self, prisma, storage):
        prisma.avatar.find_unique.side_effect = PrismaError("down")

        with pytest.raises(FileStoreUnavailableError):
            await DiskAvatarFileStore(prisma, storage).get_metadata("u1")
