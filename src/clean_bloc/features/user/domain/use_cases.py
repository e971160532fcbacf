from __future__ import annotations

from dataclasses import dataclass

from clean_bloc.core.failures import FailureCode
from clean_bloc.core.use_case import UseCase

from .entities import User
from .repositories import UserRepository, UserServiceError


@dataclass(frozen=True, slots=True)
class GetUserParams:
    user_id: int


class GetUser(UseCase[GetUserParams, User]):
    """Fetch a single user profile from the repository."""

    failure_message = "Failed to fetch user"

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    async def execute(self, params: GetUserParams) -> User:
        return await self._repository.get_user(params.user_id)

    def classify(self, error: Exception) -> FailureCode:
        if isinstance(error, UserServiceError):
            return FailureCode.SERVER
        return super().classify(error)
