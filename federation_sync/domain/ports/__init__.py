"""
PORTS - Interfaces that infrastructure implements

Subfolders:
- directories/  → Local user and room lookups

Root files:
- avatar_file_store.py   → Local avatar bytes and metadata
- federation_settings.py → Federation switches
- federation_bridge.py   → The federated network
"""

from federation_sync.domain.ports.directories import RoomDirectory, UserDirectory
from federation_sync.domain.ports.avatar_file_store import AvatarFileStore
from federation_sync.domain.ports.federation_settings import FederationSettings
from federation_sync.domain.ports.federation_bridge import FederationBridge

__all__ = [
    "UserDirectory",
    "RoomDirectory",
    "AvatarFileStore",
    "FederationSettings",
    "FederationBridge",
]
