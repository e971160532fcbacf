"""CLI entrypoint.

Runs a user bloc end to end and prints every state it emits.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import assert_never

from pydantic import ValidationError

from clean_bloc import __version__
from clean_bloc.config import AppSettings
from clean_bloc.container import AppContainer, build_container
from clean_bloc.features.user.presentation.events import FetchUser
from clean_bloc.features.user.presentation.states import (
    UserError,
    UserInitial,
    UserLoaded,
    UserLoading,
    UserState,
)
from clean_bloc.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clean-bloc",
        description="Drive the example user bloc from the command line",
    )
    parser.add_argument("--version", action="version", version=f"clean-bloc {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch_user = subparsers.add_parser(
        "fetch-user", help="Fetch a user profile and print each emitted state"
    )
    fetch_user.add_argument("--user-id", type=int, required=True, help="User id to fetch")
    fetch_user.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print states as JSON lines instead of text",
    )

    return parser


def format_state(state: UserState) -> str:
    match state:
        case UserInitial():
            return "Idle"
        case UserLoading(user_id=user_id):
            return f"Loading user {user_id}..."
        case UserLoaded(user=user):
            return f"Loaded {user.name} (age {user.age})"
        case UserError(message=message, code=code):
            return f"Error: {message}" + (f" [{code.value}]" if code is not None else "")
        case _:
            assert_never(state)


async def fetch_user(container: AppContainer, user_id: int, *, as_json: bool) -> UserState:
    """Run one `FetchUser` through a fresh bloc and return its final state."""

    def _print(state: UserState) -> None:
        print(json.dumps(state.to_json()) if as_json else format_state(state), flush=True)

    async with container.user_bloc() as bloc:
        unsubscribe = bloc.listen(_print)
        try:
            bloc.add(FetchUser(user_id=user_id))
            await bloc.settle()
        finally:
            unsubscribe()
        return bloc.state


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = AppSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    container = build_container(settings)
    try:
        if args.command == "fetch-user":
            final = asyncio.run(fetch_user(container, args.user_id, as_json=args.as_json))
            logger.debug("Final state", extra={"state": type(final).__name__})
            return 0 if isinstance(final, UserLoaded) else 1

        parser.error(f"Unknown command: {args.command}")
        return 2
    finally:
        container.close()


if __name__ == "__main__":
    raise SystemExit(main())
