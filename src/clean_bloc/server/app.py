"""FastAPI app factory.

Endpoints are intentionally thin wrappers over the user bloc.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Path

from clean_bloc import __version__
from clean_bloc.config import AppSettings
from clean_bloc.container import AppContainer, build_container
from clean_bloc.features.user.presentation.events import FetchUser
from clean_bloc.features.user.presentation.states import UserLoaded, UserState
from clean_bloc.server.models import ApiUserState, FetchUserResponse, HealthResponse

logger = logging.getLogger(__name__)


def _to_api_state(state: UserState) -> ApiUserState:
    return ApiUserState.model_validate(state.to_json())


def create_app(container: AppContainer | None = None) -> FastAPI:
    """Build the app.

    When no container is given one is built from `AppSettings()` and closed on
    shutdown; an injected container is left for the caller to close.
    """

    owns_container = container is None
    app_container = container or build_container(AppSettings())

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield
        if owns_container:
            app_container.close()

    app = FastAPI(
        title="clean-bloc",
        version=__version__,
        description="REST API over the clean-bloc example user feature.",
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    # Expose the container for request handlers that want to read it.
    app.state.container = app_container

    @app.get("/api/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(
            status="ok",
            version=__version__,
            event_policy=app_container.settings.event_policy.value,
        )

    @app.post("/api/users/{user_id}/fetch", response_model=FetchUserResponse)
    async def fetch_user(user_id: int = Path(gt=0)) -> FetchUserResponse:
        states: list[UserState] = []
        async with app_container.user_bloc() as bloc:
            bloc.listen(states.append)
            bloc.add(FetchUser(user_id=user_id))
            await bloc.settle()

        logger.info(
            "User fetch handled",
            extra={"user_id": user_id, "states": [type(s).__name__ for s in states]},
        )
        return FetchUserResponse(
            user_id=user_id,
            ok=bool(states) and isinstance(states[-1], UserLoaded),
            states=[_to_api_state(s) for s in states],
        )

    return app
