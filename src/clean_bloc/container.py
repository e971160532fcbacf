"""Composition root.

Every collaborator is built once here and handed to its consumers through
constructor arguments. Nothing is registered globally; code that needs a
dependency receives the container (or the dependency itself) explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from clean_bloc.config import AppSettings
from clean_bloc.core.observer import BlocObserver, LoggingBlocObserver
from clean_bloc.features.user.data.data_sources import UserRemoteDataSource
from clean_bloc.features.user.data.repositories import UserRepositoryImpl
from clean_bloc.features.user.domain.repositories import UserRepository
from clean_bloc.features.user.domain.use_cases import GetUser
from clean_bloc.features.user.presentation.bloc import UserBloc

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AppContainer:
    settings: AppSettings
    user_data_source: UserRemoteDataSource | None
    user_repository: UserRepository
    get_user: GetUser
    observer: BlocObserver | None

    def user_bloc(self) -> UserBloc:
        """Return a new bloc; blocs hold per-screen state and are never shared."""

        return UserBloc(
            self.get_user,
            policy=self.settings.event_policy,
            observer=self.observer,
        )

    def close(self) -> None:
        if self.user_data_source is not None:
            self.user_data_source.close()


def build_container(
    settings: AppSettings,
    *,
    session: requests.Session | None = None,
    user_repository: UserRepository | None = None,
) -> AppContainer:
    """Wire the application.

    Args:
        settings: Loaded application settings.
        session: Optional HTTP session (tests inject a fake one).
        user_repository: Optional repository override. No HTTP data source is
            built when one is given.
    """

    data_source: UserRemoteDataSource | None = None
    repository = user_repository
    if repository is None:
        data_source = UserRemoteDataSource(
            base_url=settings.api_base_url,
            timeout_seconds=settings.http_timeout_seconds,
            session=session,
        )
        repository = UserRepositoryImpl(data_source)
    observer = LoggingBlocObserver() if settings.log_transitions else None

    logger.info(
        "Container built",
        extra={
            "api_base_url": settings.api_base_url,
            "event_policy": settings.event_policy.value,
        },
    )
    return AppContainer(
        settings=settings,
        user_data_source=data_source,
        user_repository=repository,
        get_user=GetUser(repository),
        observer=observer,
    )
