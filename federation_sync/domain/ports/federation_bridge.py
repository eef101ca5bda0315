"""
Federation Bridge Port - Outbound calls to the federated network.
Implementation: federation_sync/infrastructure/matrix/matrix_bridge.py

Network and protocol failures raise BridgeUnavailableError. A rejected
upload is a normal outcome and is reported as None.
"""

from abc import ABC, abstractmethod
from typing import Optional
from federation_sync.domain.value_objects.avatar_file import AvatarFile
from federation_sync.domain.value_objects.avatar_metadata import AvatarMetadata


class FederationBridge(ABC):
    @abstractmethod
    async def upload_content(
        self, avatar: AvatarFile, metadata: AvatarMetadata
    ) -> Optional[str]:
        """Upload bytes to the remote content repository and return their URL."""
        ...

    @abstractmethod
    async def set_remote_avatar(self, external_user_id: str, url: str) -> None: ...

    @abstractmethod
    async def notify_typing(
        self, external_room_id: str, external_user_id: str, is_typing: bool
    ) -> None: ...
