"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Matrix homeserver (application service registration)
    MATRIX_HOMESERVER_URL = os.getenv("MATRIX_HOMESERVER_URL", "http://localhost:8008")
    MATRIX_HOMESERVER_DOMAIN = os.getenv("MATRIX_HOMESERVER_DOMAIN", "localhost")
    MATRIX_AS_TOKEN = os.getenv("MATRIX_AS_TOKEN", "")
    MATRIX_REQUEST_TIMEOUT = float(os.getenv("MATRIX_REQUEST_TIMEOUT", "10"))

    # Typing notifications are dropped by the homeserver after this many ms
    TYPING_TIMEOUT_MS = int(os.getenv("TYPING_TIMEOUT_MS", "30000"))

    # Federation switches
    FEDERATION_TYPING_ENABLED = os.getenv(
        "FEDERATION_TYPING_ENABLED", "true"
    ).lower() in {"1", "true", "yes", "on"}

    # Local avatar storage
    AVATAR_STORAGE_PATH = os.getenv("AVATAR_STORAGE_PATH", "uploads/avatars")

    # Event intake
    EVENT_MAX_DELIVERY_ATTEMPTS = int(os.getenv("EVENT_MAX_DELIVERY_ATTEMPTS", "3"))

    # HTTP (health + metrics only)
    HTTP_HOST = os.getenv("HTTP_HOST", "0.0.0.0")
    HTTP_PORT = int(os.getenv("HTTP_PORT", "8090"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )
