"""
Prisma User Directory - Implements UserDirectory over the local `users` collection.

Mapping:
- Prisma model fields: id, username, name, external_id,
  exists_only_on_proxy_server, federated, federation_avatar_url
- A record without external_id has no federation relationship and is
  reported as absent
- Records found here always come from a local account, so users are built
  with an internal reference
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from prisma.errors import PrismaError

from federation_sync.domain.entities.federated_user import FederatedUser
from federation_sync.domain.exceptions import DirectoryUnavailableError
from federation_sync.domain.ports.directories.user_directory import UserDirectory
from federation_sync.domain.value_objects.local_user_reference import (
    LocalUserReference,
)

if TYPE_CHECKING:
    from prisma import Prisma


def to_federated_user(record) -> Optional[FederatedUser]:
    """Map a Prisma user record to a FederatedUser, or None if it is not bridged."""
    if record is None or not record.external_id:
        return None
    user = FederatedUser.create_with_internal_reference(
        external_id=record.external_id,
        exists_only_on_proxy_server=bool(record.exists_only_on_proxy_server),
        local_user=LocalUserReference(
            internal_id=record.id, username=record.username, name=record.name
        ),
    )
    if record.federated:
        user.mark_federated()
    return user


class PrismaUserDirectory(UserDirectory):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def find_by_internal_username(self, username: str) -> Optional[FederatedUser]:
        try:
            record = await self._prisma.user.find_unique(where={"username": username})
        except PrismaError as e:
            raise DirectoryUnavailableError(
                f"Looking up user by username failed: {e}"
            ) from e
        return to_federated_user(record)

    async def find_by_internal_id(self, internal_id: str) -> Optional[FederatedUser]:
        try:
            record = await self._prisma.user.find_unique(where={"id": internal_id})
        except PrismaError as e:
            raise DirectoryUnavailableError(f"Looking up user {internal_id} failed: {e}") from e
        return to_federated_user(record)

    async def find_by_external_id(self, external_id: str) -> Optional[FederatedUser]:
        try:
            record = await self._prisma.user.find_first(where={"external_id": external_id})
        except PrismaError as e:
            raise DirectoryUnavailableError(
                f"Looking up user {external_id} failed: {e}"
            ) from e
        return to_federated_user(record)

    async def record_avatar_url(self, internal_id: str, url: str) -> bool:
        try:
            record = await self._prisma.user.update(
                where={"id": internal_id},
                data={"federation_avatar_url": url},
            )
        except PrismaError as e:
            raise DirectoryUnavailableError(
                f"Recording avatar URL for {internal_id} failed: {e}"
            ) from e
        return record is not None
