"""
UserFederationSender - Mirrors local user activity onto the federated network.

Use cases:
- after_avatar_changed(username): upload the new local avatar and set it remotely
- on_typing(username, room_id, is_typing): forward a typing notification

Each use case is a guarded pipeline. A failing guard stops the pipeline
before any further lookup or bridge call and is reported as a halted
PipelineOutcome. Most local events concern users with no federation
relationship, so halts are logged at DEBUG only.

Infrastructure errors (BridgeUnavailableError, DirectoryUnavailableError,
FileStoreUnavailableError) are not caught here. They reach the event intake
unmodified.

The service holds no state between calls. Every event re-resolves users and
rooms through the directories.
"""

import logging

from federation_sync.application.common.pipeline import (
    Guard,
    HaltReason,
    PipelineOutcome,
)
from federation_sync.domain.entities.federated_room import FederatedRoom
from federation_sync.domain.entities.federated_user import FederatedUser
from federation_sync.domain.ports import (
    AvatarFileStore,
    FederationBridge,
    FederationSettings,
    RoomDirectory,
    UserDirectory,
)
from federation_sync.domain.value_objects.avatar_file import AvatarFile
from federation_sync.domain.value_objects.avatar_metadata import AvatarMetadata
from federation_sync.observability import increment_pipeline_halt

logger = logging.getLogger(__name__)

AVATAR_USE_CASE = "avatar"
TYPING_USE_CASE = "typing"


class UserFederationSender:
    def __init__(
        self,
        room_directory: RoomDirectory,
        user_directory: UserDirectory,
        avatar_file_store: AvatarFileStore,
        settings: FederationSettings,
        bridge: FederationBridge,
    ):
        self._room_directory = room_directory
        self._user_directory = user_directory
        self._avatar_file_store = avatar_file_store
        self._settings = settings
        self._bridge = bridge

    # ==================== AVATAR ====================

    async def after_avatar_changed(self, username: str) -> PipelineOutcome:
        user_guard = await self._resolve_user(username)
        if user_guard.halted:
            return self._stop(AVATAR_USE_CASE, user_guard, username=username)
        user = user_guard.unwrap()

        target_guard = self._write_back_target(user)
        if target_guard.halted:
            return self._stop(AVATAR_USE_CASE, target_guard, username=username)
        internal_id = target_guard.unwrap()

        buffer_guard = await self._load_avatar(internal_id)
        if buffer_guard.halted:
            return self._stop(AVATAR_USE_CASE, buffer_guard, username=username)

        metadata_guard = await self._load_avatar_metadata(internal_id)
        if metadata_guard.halted:
            return self._stop(AVATAR_USE_CASE, metadata_guard, username=username)

        url_guard = await self._upload_avatar(
            buffer_guard.unwrap(), metadata_guard.unwrap()
        )
        if url_guard.halted:
            return self._stop(AVATAR_USE_CASE, url_guard, username=username)
        url = url_guard.unwrap()

        # Local write-back first; the remote avatar is only set once it is recorded.
        recorded_guard = await self._record_avatar_url(internal_id, url)
        if recorded_guard.halted:
            return self._stop(AVATAR_USE_CASE, recorded_guard, username=username)

        await self._bridge.set_remote_avatar(user.external_id, url)
        logger.info("Federated avatar for %s set to %s", user.external_id, url)
        return PipelineOutcome.completed(AVATAR_USE_CASE)

    def _write_back_target(self, user: FederatedUser) -> Guard[str]:
        if user.is_remote():
            return Guard.halt(HaltReason.REMOTE_USER)
        target = user.avatar_write_back_target
        if target is None:
            return Guard.halt(HaltReason.MISSING_INTERNAL_ID)
        return Guard.proceed(target)

    async def _load_avatar(self, internal_id: str) -> Guard[AvatarFile]:
        avatar = await self._avatar_file_store.get_buffer(internal_id)
        if avatar is None:
            return Guard.halt(HaltReason.AVATAR_NOT_FOUND)
        return Guard.proceed(avatar)

    async def _load_avatar_metadata(self, internal_id: str) -> Guard[AvatarMetadata]:
        metadata = await self._avatar_file_store.get_metadata(internal_id)
        if metadata is None or not metadata.is_complete():
            return Guard.halt(HaltReason.AVATAR_METADATA_MISSING)
        return Guard.proceed(metadata)

    async def _upload_avatar(
        self, avatar: AvatarFile, metadata: AvatarMetadata
    ) -> Guard[str]:
        url = await self._bridge.upload_content(avatar, metadata)
        if not url:
            return Guard.halt(HaltReason.UPLOAD_REJECTED)
        return Guard.proceed(url)

    async def _record_avatar_url(self, internal_id: str, url: str) -> Guard[str]:
        if not await self._user_directory.record_avatar_url(internal_id, url):
            logger.warning(
                "Avatar URL for local user %s was not recorded; remote avatar left unchanged",
                internal_id,
            )
            return Guard.halt(HaltReason.WRITE_BACK_REJECTED)
        return Guard.proceed(url)

    # ==================== TYPING ====================

    async def on_typing(
        self, username: str, room_id: str, is_typing: bool
    ) -> PipelineOutcome:
        # Checked before any lookup
        if not self._settings.is_typing_indicator_enabled():
            return self._stop(
                TYPING_USE_CASE, Guard.halt(HaltReason.TYPING_DISABLED), room_id=room_id
            )

        user_guard = await self._resolve_user(username)
        if user_guard.halted:
            return self._stop(TYPING_USE_CASE, user_guard, username=username)

        room_guard = await self._resolve_room(room_id)
        if room_guard.halted:
            return self._stop(TYPING_USE_CASE, room_guard, room_id=room_id)

        room = room_guard.unwrap()
        user = user_guard.unwrap()
        await self._bridge.notify_typing(room.external_id, user.external_id, is_typing)
        return PipelineOutcome.completed(TYPING_USE_CASE)

    async def _resolve_room(self, room_id: str) -> Guard[FederatedRoom]:
        room = await self._room_directory.find_by_internal_id(room_id)
        if room is None:
            return Guard.halt(HaltReason.ROOM_NOT_FOUND)
        return Guard.proceed(room)

    # ==================== SHARED ====================

    async def _resolve_user(self, username: str) -> Guard[FederatedUser]:
        user = await self._user_directory.find_by_internal_username(username)
        if user is None:
            return Guard.halt(HaltReason.USER_NOT_FOUND)
        return Guard.proceed(user)

    def _stop(self, use_case: str, guard: Guard, **context) -> PipelineOutcome:
        reason = guard.reason
        logger.debug("%s pipeline halted: %s %s", use_case, reason.value, context)
        increment_pipeline_halt(use_case, reason.value)
        return PipelineOutcome.halted(use_case, reason)
