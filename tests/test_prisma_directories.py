"""
Unit tests for the Prisma directory adapters.

The Prisma client is replaced by a MagicMock whose model delegates are
AsyncMocks, so no database is needed.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from prisma.errors import PrismaError

from federation_sync.domain.exceptions import DirectoryUnavailableError
from federation_sync.domain.value_objects import RoomType
from federation_sync.infrastructure.persistence import (
    PrismaRoomDirectory,
    PrismaUserDirectory,
)


def user_record(**overrides):
    fields = dict(
        id="_id",
        username="alice",
        name="Alice",
        external_id="@alice:local.org",
        exists_only_on_proxy_server=False,
        federated=True,
        federation_avatar_url=None,
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.fixture()
def prisma():
    client = MagicMock()
    client.user.find_unique = AsyncMock()
    client.user.find_first = AsyncMock()
    client.user.update = AsyncMock()
    client.room.find_unique = AsyncMock()
    return client


class TestPrismaUserDirectory:
    """User lookups and avatar write-back."""

    @pytest.mark.asyncio
    async def test_find_by_internal_username(self, prisma):
        prisma.user.find_unique.return_value = user_record()
        directory = PrismaUserDirectory(prisma)

        user = await directory.find_by_internal_username("alice")

        prisma.user.find_unique.assert_awaited_once_with(where={"username": "alice"})
        assert user.external_id == "@alice:local.org"
        assert user.internal_id == "_id"
        assert user.display_name == "Alice"
        assert user.federated is True
        assert user.is_remote() is False

    @pytest.mark.asyncio
    async def test_unknown_user(self, prisma):
        prisma.user.find_unique.return_value = None

        assert await PrismaUserDirectory(prisma).find_by_internal_id("nope") is None

    @pytest.mark.asyncio
    async def test_user_without_external_id_is_not_bridged(self, prisma):
        prisma.user.find_unique.return_value = user_record(external_id=None)

        assert await PrismaUserDirectory(prisma).find_by_internal_id("_id") is None

    @pytest.mark.asyncio
    async def test_find_by_external_id(self, prisma):
        prisma.user.find_first.return_value = user_record(
            exists_only_on_proxy_server=True
        )

        user = await PrismaUserDirectory(prisma).find_by_external_id("@alice:local.org")

        prisma.user.find_first.assert_awaited_once_with(
            where={"external_id": "@alice:local.org"}
        )
        assert user.is_remote() is True

    @pytest.mark.asyncio
    async def test_record_avatar_url(self, prisma):
        prisma.user.update.return_value = user_record(federation_avatar_url="url")

        recorded = await PrismaUserDirectory(prisma).record_avatar_url("_id", "url")

        assert recorded is True
        prisma.user.update.assert_awaited_once_with(
            where={"id": "_id"}, data={"federation_avatar_url": "url"}
        )

    @pytest.mark.asyncio
    async def test_record_avatar_url_for_missing_user(self, prisma):
        prisma.user.update.return_value = None

        assert await PrismaUserDirectory(prisma).record_avatar_url("_id", "url") is False

    @pytest.mark.asyncio
    async def test_database_error_is_wrapped(self, prisma):
        prisma.user.find_unique.side_effect = PrismaError("connection lost")

        with pytest.raises(DirectoryUnavailableError, match="connection lost"):
            await PrismaUserDirectory(prisma).find_by_internal_username("alice")


class TestPrismaRoomDirectory:
    """Room lookups."""

    @pytest.mark.asyncio
    async def test_find_by_internal_id(self, prisma):
        prisma.room.find_unique.return_value = SimpleNamespace(
            id="GENERAL",
            external_id="!general:local.org",
            name="general",
            room_type="c",
            creator=user_record(),
        )

        room = await PrismaRoomDirectory(prisma).find_by_internal_id("GENERAL")

        prisma.room.find_unique.assert_awaited_once_with(
            where={"id": "GENERAL"}, include={"creator": True}
        )
        assert room.external_id == "!general:local.org"
        assert room.internal_id == "GENERAL"
        assert room.room_type is RoomType.CHANNEL
        assert room.creator_external_id == "@alice:local.org"

    @pytest.mark.asyncio
    async def test_room_without_bridged_creator(self, prisma):
        prisma.room.find_unique.return_value = SimpleNamespace(
            id="DM1", external_id="!dm:local.org", name=None, room_type="d", creator=None
        )

        room = await PrismaRoomDirectory(prisma).find_by_internal_id("DM1")

        assert room.owner is None
        assert room.is_direct_message() is True

    @pytest.mark.asyncio
    async def test_unbridged_room(self, prisma):
        prisma.room.find_unique.return_value = SimpleNamespace(
            id="LOCAL", external_id=None, name="local", room_type="c", creator=None
        )

        assert await PrismaRoomDirectory(prisma).find_by_internal_id("LOCAL") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("room_type", ["v", "", None])
    async def test_unsupported_room_type_is_absent(self, prisma, room_type):
        prisma.room.find_unique.return_value = SimpleNamespace(
            id="VOIP",
            external_id="!voip:local.org",
            name="call",
            room_type=room_type,
            creator=user_record(),
        )

        assert await PrismaRoomDirectory(prisma).find_by_internal_id("VOIP") is None

    @pytest.mark.asyncio
    async def test_database_error_is_wrapped(self, prisma):
        prisma.room.find_unique.side_effect = PrismaError("timeout")

        with pytest.raises(DirectoryUnavailableError):
            await PrismaRoomDirectory(prisma).find_by_internal_id("GENERAL")
