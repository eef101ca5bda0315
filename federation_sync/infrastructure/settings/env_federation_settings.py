"""
EnvFederationSettings - FederationSettings backed by environment configuration.
"""

from typing import Optional

from federation_sync.config.settings import Config
from federation_sync.domain.ports.federation_settings import FederationSettings


class EnvFederationSettings(FederationSettings):
    def __init__(
        self,
        typing_enabled: Optional[bool] = None,
        homeserver_domain: Optional[str] = None,
    ):
        """
        Args:
            typing_enabled: Overrides Config.FEDERATION_TYPING_ENABLED
            homeserver_domain: Overrides Config.MATRIX_HOMESERVER_DOMAIN
        """
        self._typing_enabled = (
            Config.FEDERATION_TYPING_ENABLED if typing_enabled is None else typing_enabled
        )
        self._homeserver_domain = homeserver_domain or Config.MATRIX_HOMESERVER_DOMAIN

    def is_typing_indicator_enabled(self) -> bool:
        return self._typing_enabled

    def home_server_domain(self) -> str:
        return self._homeserver_domain
