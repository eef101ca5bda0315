from federation_sync.infrastructure.settings.env_federation_settings import (
    EnvFederationSettings,
)

__all__ = ["EnvFederationSettings"]
