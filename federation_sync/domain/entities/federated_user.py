"""
FederatedUser Entity - A user as seen by the federation layer.

A federated user always has an external id (its id in the federated
namespace). It has an internal id only when it was built from a local
account record. Users that exist only on the proxy server mirror a remote
actor and never receive avatar write-backs.
"""

from dataclasses import dataclass, field
from typing import Optional

from federation_sync.domain.exceptions import PreconditionError
from federation_sync.domain.value_objects.local_user_reference import (
    LocalUserReference,
)


@dataclass
class FederatedUser:
    external_id: str
    exists_only_on_proxy_server: bool
    username: Optional[str] = None
    display_name: Optional[str] = None
    federated: bool = False
    local_reference: Optional[LocalUserReference] = field(default=None, repr=False)

    def __post_init__(self):
        if not self.external_id or not self.external_id.strip():
            raise ValueError("Federated user requires an external id")

    @classmethod
    def create_instance(
        cls,
        external_id: str,
        username: Optional[str] = None,
        display_name: Optional[str] = None,
        exists_only_on_proxy_server: bool = False,
    ) -> "FederatedUser":
        """Model a user purely from federation-side information."""
        return cls(
            external_id=external_id,
            exists_only_on_proxy_server=exists_only_on_proxy_server,
            username=username,
            display_name=display_name,
        )

    @classmethod
    def create_with_internal_reference(
        cls,
        external_id: str,
        exists_only_on_proxy_server: bool,
        local_user: LocalUserReference,
    ) -> "FederatedUser":
        """Model a user whose local account record is known."""
        return cls(
            external_id=external_id,
            exists_only_on_proxy_server=exists_only_on_proxy_server,
            username=local_user.username,
            display_name=local_user.name,
            local_reference=local_user,
        )

    @property
    def has_internal_reference(self) -> bool:
        return self.local_reference is not None

    @property
    def internal_id(self) -> str:
        if self.local_reference is None:
            raise PreconditionError(
                f"Federated user {self.external_id} has no internal reference"
            )
        return self.local_reference.internal_id

    @property
    def avatar_write_back_target(self) -> Optional[str]:
        """Internal id to record a federated avatar URL against, if any."""
        if self.exists_only_on_proxy_server or self.local_reference is None:
            return None
        return self.local_reference.internal_id

    def is_remote(self) -> bool:
        return self.exists_only_on_proxy_server

    def mark_federated(self) -> None:
        self.federated = True
