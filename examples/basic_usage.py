#!/usr/bin/env python3
"""Programmatic user fetch example.

This demonstrates using the components directly:

* load settings from `.env`
* build the container (the only place dependencies are wired)
* drive a `UserBloc` and watch its states through `stream()`
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

from clean_bloc.config import AppSettings
from clean_bloc.container import build_container
from clean_bloc.features.user.presentation.events import FetchUser, RefreshUser
from clean_bloc.features.user.presentation.states import UserLoaded
from clean_bloc.logging import configure_logging


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch a user twice through a UserBloc.")
    parser.add_argument("--user-id", type=int, default=1, help="User id to fetch")
    return parser.parse_args(argv)


async def _run(user_id: int) -> int:
    settings = AppSettings()
    configure_logging(settings.log_level)

    container = build_container(settings)
    try:
        bloc = container.user_bloc()
        states = bloc.stream()

        bloc.add(FetchUser(user_id=user_id))
        bloc.add(RefreshUser())
        await bloc.close()

        async for state in states:
            print(state)
        return 0 if isinstance(bloc.state, UserLoaded) else 1
    finally:
        container.close()


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    return asyncio.run(_run(args.user_id))


if __name__ == "__main__":
    raise SystemExit(main())
