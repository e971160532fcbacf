from __future__ import annotations

from typing import Protocol

from .entities import User


class UserNotFoundError(LookupError):
    def __init__(self, user_id: int) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class UserServiceError(RuntimeError):
    """The user service answered, but with an error."""


class UserRepository(Protocol):
    """Source of user profiles.

    Implementations raise `UserNotFoundError`, `UserServiceError`,
    `ConnectionError`, `TimeoutError` or `ValueError` (malformed data).
    Turning errors into results is the use case's job.
    """

    async def get_user(self, user_id: int) -> User: ...
