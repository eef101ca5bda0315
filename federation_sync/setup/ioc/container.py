"""
Dishka DI Container Setup.

- Registers the adapters behind every port, the sender, the listener and the bus
- Maps abstract ports to concrete implementations
- Everything is app-scoped: the sender is stateless and adapters hold only clients

Flow:
  Container → provides → PrismaUserDirectory ──┐
                         PrismaRoomDirectory ──┤
                         DiskAvatarFileStore ──┼──► UserFederationSender ──► FederationEventListener ──► InProcessEventBus
                         EnvFederationSettings ┤
                         MatrixFederationBridge┘
"""

from typing import AsyncIterable

import httpx
from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from prisma import Prisma

from federation_sync.application.services.user_federation_sender import (
    UserFederationSender,
)
from federation_sync.config.settings import Config
from federation_sync.domain.ports import (
    AvatarFileStore,
    FederationBridge,
    FederationSettings,
    RoomDirectory,
    UserDirectory,
)
from federation_sync.infrastructure.events import InProcessEventBus
from federation_sync.infrastructure.matrix import (
    MatrixFederationBridge,
    create_homeserver_client,
)
from federation_sync.infrastructure.persistence import (
    PrismaRoomDirectory,
    PrismaUserDirectory,
)
from federation_sync.infrastructure.settings import EnvFederationSettings
from federation_sync.infrastructure.storage import (
    DiskAvatarFileStore,
    FileStorageService,
)
from federation_sync.presentation.listeners import FederationEventListener


class AppProvider(Provider):
    """Application dependency provider."""

    # ==================== CLIENTS ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """Prisma client, connected once and disconnected when the container closes."""
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    @provide(scope=Scope.APP)
    async def get_homeserver_client(self) -> AsyncIterable[httpx.AsyncClient]:
        async with create_homeserver_client() as client:
            yield client

    # ==================== PORTS ====================

    @provide(scope=Scope.APP)
    def get_user_directory(self, prisma: Prisma) -> UserDirectory:
        return PrismaUserDirectory(prisma)

    @provide(scope=Scope.APP)
    def get_room_directory(self, prisma: Prisma) -> RoomDirectory:
        return PrismaRoomDirectory(prisma)

    @provide(scope=Scope.APP)
    def get_avatar_file_store(self, prisma: Prisma) -> AvatarFileStore:
        return DiskAvatarFileStore(prisma, FileStorageService(Config.AVATAR_STORAGE_PATH))

    @provide(scope=Scope.APP)
    def get_federation_settings(self) -> FederationSettings:
        return EnvFederationSettings()

    @provide(scope=Scope.APP)
    def get_federation_bridge(self, client: httpx.AsyncClient) -> FederationBridge:
        return MatrixFederationBridge(
            client,
            as_token=Config.MATRIX_AS_TOKEN,
            typing_timeout_ms=Config.TYPING_TIMEOUT_MS,
        )

    # ==================== APPLICATION ====================

    @provide(scope=Scope.APP)
    def get_user_federation_sender(
        self,
        room_directory: RoomDirectory,
        user_directory: UserDirectory,
        avatar_file_store: AvatarFileStore,
        settings: FederationSettings,
        bridge: FederationBridge,
    ) -> UserFederationSender:
        return UserFederationSender(
            room_directory=room_directory,
            user_directory=user_directory,
            avatar_file_store=avatar_file_store,
            settings=settings,
            bridge=bridge,
        )

    # ==================== EVENT INTAKE ====================

    @provide(scope=Scope.APP)
    def get_federation_listener(
        self, sender: UserFederationSender
    ) -> FederationEventListener:
        return FederationEventListener(sender)

    @provide(scope=Scope.APP)
    def get_event_bus(self, listener: FederationEventListener) -> InProcessEventBus:
        """Bus with the federation listener already subscribed."""
        bus = InProcessEventBus(Config.EVENT_MAX_DELIVERY_ATTEMPTS)
        listener.register(bus)
        return bus


def create_container() -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE at startup and close it on shutdown
    (disconnects Prisma, closes the homeserver client).
    """
    return make_async_container(AppProvider())
