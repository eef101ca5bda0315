"""
Command line entry point.

Usage:
    python -m federation_sync serve [--host 0.0.0.0] [--port 8090]
    python -m federation_sync avatar-update --username alice
    python -m federation_sync typing --room-id GENERAL --username alice [--stopped]

`avatar-update` and `typing` publish a single internal event and wait until
the federation listener has handled it.
"""

import argparse
import asyncio
from typing import Any, Dict, Optional, Sequence, Tuple

from dishka import AsyncContainer

from federation_sync.config.logging_config import setup_logging
from federation_sync.config.settings import Config
from federation_sync.infrastructure.events import InProcessEventBus
from federation_sync.presentation.listeners import AVATAR_UPDATE_EVENT, TYPING_EVENT


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="federation_sync",
        description="Mirror local user activity onto the Matrix federation",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Run the service with /health and /metrics")
    serve.add_argument("--host", default=Config.HTTP_HOST)
    serve.add_argument("--port", type=int, default=Config.HTTP_PORT)

    avatar = commands.add_parser("avatar-update", help="Publish user.avatarUpdate")
    avatar.add_argument("--username", required=True)

    typing = commands.add_parser("typing", help="Publish user.typing")
    typing.add_argument("--room-id", required=True)
    typing.add_argument("--username", required=True)
    typing.add_argument(
        "--stopped", action="store_true", help="Send isTyping=false instead of true"
    )
    return parser


def event_from_args(args: argparse.Namespace) -> Tuple[str, Dict[str, Any]]:
    if args.command == "avatar-update":
        return AVATAR_UPDATE_EVENT, {"username": args.username}
    if args.command == "typing":
        return TYPING_EVENT, {
            "roomId": args.room_id,
            "user": {"username": args.username},
            "isTyping": not args.stopped,
        }
    raise ValueError(f"Command {args.command!r} does not publish an event")


async def publish_once(
    topic: str, payload: Dict[str, Any], container: Optional[AsyncContainer] = None
) -> None:
    if container is None:
        from federation_sync.setup.ioc import create_container

        container = create_container()
    try:
        bus = await container.get(InProcessEventBus)
        bus.publish(topic, payload)
        await bus.drain()
    finally:
        await container.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH or None)

    if args.command == "serve":
        import uvicorn

        from federation_sync.fastapi_app import create_fastapi_app

        uvicorn.run(create_fastapi_app(), host=args.host, port=args.port, log_level="warning")
        return 0

    topic, payload = event_from_args(args)
    asyncio.run(publish_once(topic, payload))
    return 0
