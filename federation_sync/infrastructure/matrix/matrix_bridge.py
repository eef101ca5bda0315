"""
Matrix Federation Bridge - FederationBridge over the Matrix client-server API.

The service is registered on the homeserver as an application service. It
authenticates with the AS token and acts on behalf of bridged users through
the `user_id` query parameter.

Endpoints:
- POST /_matrix/media/v3/upload?filename=...                 → {"content_uri": "mxc://..."}
- PUT  /_matrix/client/v3/profile/{userId}/avatar_url        {"avatar_url": ...}
- PUT  /_matrix/client/v3/rooms/{roomId}/typing/{userId}     {"typing": ..., "timeout": ...}

Error mapping:
- Transport errors, timeouts and 5xx responses → BridgeUnavailableError
- 401, 403, 408 and 429 on upload → BridgeUnavailableError (retried by the bus)
- Upload answered with any other 4xx or without content_uri → None (rejected upload)
- Any other non-2xx response for avatar/typing → BridgeUnavailableError
"""

import logging
import time
from typing import Optional
from urllib.parse import quote

import httpx

from federation_sync.config.settings import Config
from federation_sync.domain.exceptions import BridgeUnavailableError
from federation_sync.domain.ports.federation_bridge import FederationBridge
from federation_sync.domain.value_objects.avatar_file import AvatarFile
from federation_sync.domain.value_objects.avatar_metadata import AvatarMetadata
from federation_sync.observability import observe_bridge_latency

logger = logging.getLogger(__name__)

MEDIA_UPLOAD_PATH = "/_matrix/media/v3/upload"
PROFILE_AVATAR_PATH = "/_matrix/client/v3/profile/{user_id}/avatar_url"
TYPING_PATH = "/_matrix/client/v3/rooms/{room_id}/typing/{user_id}"

# Client errors that are not a verdict on the uploaded content
TRANSIENT_CLIENT_ERRORS = frozenset({401, 403, 408, 429})


def _json_object(response: httpx.Response) -> dict:
    """Response body as a dict, or {} when it is not a JSON object."""
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class MatrixFederationBridge(FederationBridge):
    """Matrix implementation of FederationBridge."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        as_token: str = None,
        typing_timeout_ms: int = None,
    ):
        """
        Args:
            client: httpx client whose base_url points at the homeserver
            as_token: Application service token (default: Config.MATRIX_AS_TOKEN)
            typing_timeout_ms: Typing notification lifetime (default: Config.TYPING_TIMEOUT_MS)
        """
        self._client = client
        self._as_token = as_token or Config.MATRIX_AS_TOKEN
        self._typing_timeout_ms = typing_timeout_ms or Config.TYPING_TIMEOUT_MS

    async def upload_content(
        self, avatar: AvatarFile, metadata: AvatarMetadata
    ) -> Optional[str]:
        response = await self._request(
            "upload",
            "POST",
            MEDIA_UPLOAD_PATH,
            params={"filename": metadata.file_name},
            content=avatar.content,
            headers={"Content-Type": metadata.content_type},
        )

        if (
            response.status_code >= 500
            or response.status_code in TRANSIENT_CLIENT_ERRORS
        ):
            raise BridgeUnavailableError(
                f"Media upload failed ({response.status_code}): {response.text}"
            )
        if response.status_code >= 400:
            logger.warning(
                "Homeserver rejected upload of %s (%s): %s",
                metadata.file_name,
                response.status_code,
                response.text,
            )
            return None

        content_uri = _json_object(response).get("content_uri")
        if not content_uri:
            logger.warning("Upload response for %s had no content_uri", metadata.file_name)
            return None
        return content_uri

    async def set_remote_avatar(self, external_user_id: str, url: str) -> None:
        response = await self._request(
            "set_avatar",
            "PUT",
            PROFILE_AVATAR_PATH.format(user_id=quote(external_user_id, safe="")),
            params={"user_id": external_user_id},
            json={"avatar_url": url},
        )
        self._raise_for_status(response, f"Setting avatar of {external_user_id}")

    async def notify_typing(
        self, external_room_id: str, external_user_id: str, is_typing: bool
    ) -> None:
        body: dict = {"typing": is_typing}
        if is_typing:
            body["timeout"] = self._typing_timeout_ms

        response = await self._request(
            "typing",
            "PUT",
            TYPING_PATH.format(
                room_id=quote(external_room_id, safe=""),
                user_id=quote(external_user_id, safe=""),
            ),
            params={"user_id": external_user_id},
            json=body,
        )
        self._raise_for_status(
            response, f"Typing notification for {external_user_id} in {external_room_id}"
        )

    async def _request(self, operation: str, method: str, path: str, **kwargs) -> httpx.Response:
        headers = {"Authorization": f"Bearer {self._as_token}"}
        headers.update(kwargs.pop("headers", {}))

        started = time.perf_counter()
        try:
            return await self._client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            raise BridgeUnavailableError(
                f"Homeserver unreachable during {operation}: {e!r}"
            ) from e
        finally:
            observe_bridge_latency(operation, time.perf_counter() - started)

    @staticmethod
    def _raise_for_status(response: httpx.Response, action: str) -> None:
        if response.status_code >= 400:
            error_detail = _json_object(response).get("error", response.text)
            raise BridgeUnavailableError(
                f"{action} failed ({response.status_code}): {error_detail}"
            )
