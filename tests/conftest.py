import os
import sys
from unittest.mock import create_autospec

import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

from federation_sync.application.services.user_federation_sender import (
    UserFederationSender,
)
from federation_sync.domain.entities import FederatedRoom, FederatedUser
from federation_sync.domain.ports import (
    AvatarFileStore,
    FederationBridge,
    FederationSettings,
    RoomDirectory,
    UserDirectory,
)
from federation_sync.domain.value_objects import LocalUserReference, RoomType


@pytest.fixture()
def user_directory():
    return create_autospec(UserDirectory, instance=True)


@pytest.fixture()
def room_directory():
    return create_autospec(RoomDirectory, instance=True)


@pytest.fixture()
def avatar_file_store():
    return create_autospec(AvatarFileStore, instance=True)


@pytest.fixture()
def federation_settings():
    settings = create_autospec(FederationSettings, instance=True)
    settings.home_server_domain.return_value = "localDomain"
    return settings


@pytest.fixture()
def bridge():
    return create_autospec(FederationBridge, instance=True)


@pytest.fixture()
def sender(room_directory, user_directory, avatar_file_store, federation_settings, bridge):
    return UserFederationSender(
        room_directory=room_directory,
        user_directory=user_directory,
        avatar_file_store=avatar_file_store,
        settings=federation_settings,
        bridge=bridge,
    )


@pytest.fixture()
def local_user():
    """A bridged user backed by a local account."""
    return FederatedUser.create_with_internal_reference(
        "externalInviterId",
        False,
        LocalUserReference(
            internal_id="_id", username="normalizedInviterId", name="normalizedInviterId"
        ),
    )


@pytest.fixture()
def proxy_user():
    """A local placeholder for a remote actor."""
    return FederatedUser.create_instance(
        "externalInviterId",
        username="normalizedInviterId",
        display_name="normalizedInviterId",
        exists_only_on_proxy_server=True,
    )


@pytest.fixture()
def channel(local_user):
    return FederatedRoom.create_instance(
        "externalRoomId", "normalizedRoomId", local_user, RoomType.CHANNEL, "externalRoomName"
    )
