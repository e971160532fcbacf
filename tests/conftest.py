"""Test configuration and fixtures."""

from __future__ import annotations

import pytest

from clean_bloc.config import AppSettings
from clean_bloc.container import AppContainer, build_container
from clean_bloc.features.user.domain.entities import User
from clean_bloc.features.user.domain.repositories import UserNotFoundError


class FakeUserRepository:
    """In-memory `UserRepository` that records calls."""

    def __init__(
        self,
        users: dict[int, User] | None = None,
        *,
        error: Exception | None = None,
    ) -> None:
        self.users = users or {}
        self.error = error
        self.calls: list[int] = []

    async def get_user(self, user_id: int) -> User:
        self.calls.append(user_id)
        if self.error is not None:
            raise self.error
        if user_id not in self.users:
            raise UserNotFoundError(user_id)
        return self.users[user_id]


@pytest.fixture
def john() -> User:
    return User(name="John Doe", age=30)


@pytest.fixture
def user_repository(john: User) -> FakeUserRepository:
    """Provide a repository that knows user 1."""
    return FakeUserRepository({1: john})


@pytest.fixture
def settings() -> AppSettings:
    """Provide test settings that ignore any local `.env`."""
    return AppSettings(
        _env_file=None,
        CLEAN_BLOC_API_BASE_URL="http://users.test",
        CLEAN_BLOC_LOG_TRANSITIONS=False,
    )


@pytest.fixture
def container(settings: AppSettings, user_repository: FakeUserRepository) -> AppContainer:
    """Provide a container wired to the fake repository."""
    return build_container(settings, user_repository=user_repository)
