"""
User Directory Port - Interface for reading federated users from the local store.
Implementation: federation_sync/infrastructure/persistence/prisma_user_directory.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from federation_sync.domain.entities.federated_user import FederatedUser


class UserDirectory(ABC):
    @abstractmethod
    async def find_by_internal_username(
        self, username: str
    ) -> Optional[FederatedUser]: ...

    @abstractmethod
    async def find_by_internal_id(self, internal_id: str) -> Optional[FederatedUser]: ...

    @abstractmethod
    async def find_by_external_id(self, external_id: str) -> Optional[FederatedUser]: ...

    @abstractmethod
    async def record_avatar_url(self, internal_id: str, url: str) -> bool:
        """Store the federated avatar URL. Returns False if no record was updated."""
        ...
