"""httpx client for the Matrix homeserver."""

import httpx

from federation_sync.config.settings import Config


def create_homeserver_client(
    base_url: str = None, timeout: float = None
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url or Config.MATRIX_HOMESERVER_URL,
        timeout=timeout or Config.MATRIX_REQUEST_TIMEOUT,
    )
