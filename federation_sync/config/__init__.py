from federation_sync.config.settings import Config
from federation_sync.config.logging_config import correlation_id_var, setup_logging

__all__ = ["Config", "correlation_id_var", "setup_logging"]
