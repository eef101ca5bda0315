"""
Federation Settings Port - Read-only switches for the federation layer.
Implementation: federation_sync/infrastructure/settings/env_federation_settings.py
"""

from abc import ABC, abstractmethod


class FederationSettings(ABC):
    @abstractmethod
    def is_typing_indicator_enabled(self) -> bool: ...

    @abstractmethod
    def home_server_domain(self) -> str: ...
