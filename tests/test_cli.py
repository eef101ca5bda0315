"""
Unit tests for the command line entry point.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from federation_sync import cli
from federation_sync.infrastructure.events import InProcessEventBus
from federation_sync.presentation.listeners import AVATAR_UPDATE_EVENT, TYPING_EVENT


def fake_container(bus):
    container = MagicMock()
    container.get = AsyncMock(return_value=bus)
    container.close = AsyncMock()
    return container


class TestParser:
    """Argument parsing and event building."""

    def test_avatar_update(self):
        args = cli.build_parser().parse_args(["avatar-update", "--username", "alice"])

        assert cli.event_from_args(args) == (AVATAR_UPDATE_EVENT, {"username": "alice"})

    def test_typing_started(self):
        args = cli.build_parser().parse_args(
            ["typing", "--room-id", "GENERAL", "--username", "alice"]
        )

        assert cli.event_from_args(args) == (
            TYPING_EVENT,
            {"roomId": "GENERAL", "user": {"username": "alice"}, "isTyping": True},
        )

    def test_typing_stopped(self):
        args = cli.build_parser().parse_args(
            ["typing", "--room-id", "GENERAL", "--username", "alice", "--stopped"]
        )

        _, payload = cli.event_from_args(args)
        assert payload["isTyping"] is False

    def test_serve_does_not_publish(self):
        args = cli.build_parser().parse_args(["serve", "--port", "9000"])

        assert args.port == 9000
        with pytest.raises(ValueError):
            cli.event_from_args(args)

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestPublishOnce:
    """Single event publication."""

    @pytest.mark.asyncio
    async def test_publishes_drains_and_closes(self):
        bus = InProcessEventBus(max_delivery_attempts=1)
        received = []

        async def handler(payload):
            received.append(payload)

        bus.subscribe(AVATAR_UPDATE_EVENT, handler)
        container = fake_container(bus)

        await cli.publish_once(AVATAR_UPDATE_EVENT, {"username": "alice"}, container)

        assert received == [{"username": "alice"}]
        container.get.assert_awaited_once_with(InProcessEventBus)
        container.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_container_closed_when_resolution_fails(self):
        container = fake_container(None)
        container.get.side_effect = RuntimeError("no database")

        with pytest.raises(RuntimeError):
            await cli.publish_once(AVATAR_UPDATE_EVENT, {"username": "alice"}, container)

        container.close.assert_awaited_once()

    def test_main_publishes_event(self, monkeypatch):
        publish = AsyncMock()
        monkeypatch.setattr(cli, "publish_once", publish)
        monkeypatch.setattr(cli, "setup_logging", MagicMock())

        assert cli.main(["avatar-update", "--username", "alice"]) == 0

        publish.assert_awaited_once_with(AVATAR_UPDATE_EVENT, {"username": "alice"})
