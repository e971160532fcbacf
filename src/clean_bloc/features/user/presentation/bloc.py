from __future__ import annotations

from typing import assert_never

from clean_bloc.core.bloc import Bloc, Emitter, EventPolicy
from clean_bloc.core.failures import FailureCode
from clean_bloc.core.observer import BlocObserver
from clean_bloc.features.user.domain.use_cases import GetUser, GetUserParams

from .events import FetchUser, RefreshUser, ResetUser, UserEvent
from .states import UserError, UserInitial, UserLoaded, UserLoading, UserState


class UserBloc(Bloc[UserEvent, UserState]):
    """Drive the user profile screen.

    `FetchUser` and `RefreshUser` emit `UserLoading` and then exactly one of
    `UserLoaded` / `UserError`. `ResetUser` goes back to `UserInitial`.
    """

    def __init__(
        self,
        get_user: GetUser,
        *,
        policy: EventPolicy = EventPolicy.SEQUENTIAL,
        observer: BlocObserver | None = None,
    ) -> None:
        super().__init__(UserInitial(), policy=policy, observer=observer)
        self._get_user = get_user
        self._last_user_id: int | None = None

    async def handle(self, event: UserEvent, emit: Emitter[UserState]) -> None:
        match event:
            case FetchUser(user_id=user_id):
                await self._load(user_id, emit)
            case RefreshUser():
                if self._last_user_id is None:
                    emit(UserError(message="No user to refresh"))
                    return
                await self._load(self._last_user_id, emit)
            case ResetUser():
                self._last_user_id = None
                emit(UserInitial())
            case _:
                assert_never(event)

    def on_error(self, event: UserEvent, error: Exception) -> UserState | None:
        return UserError(message="Something went wrong", code=FailureCode.UNEXPECTED)

    async def _load(self, user_id: int, emit: Emitter[UserState]) -> None:
        self._last_user_id = user_id
        emit(UserLoading(user_id=user_id))
        result = await self._get_user(GetUserParams(user_id=user_id))
        emit(
            result.fold(
                lambda user: UserLoaded(user=user),
                lambda failure: UserError(message=failure.message, code=failure.code),
            )
        )
