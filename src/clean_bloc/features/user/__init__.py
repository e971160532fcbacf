"""User profile feature."""

from clean_bloc.features.user.domain.entities import User
from clean_bloc.features.user.domain.use_cases import GetUser, GetUserParams
from clean_bloc.features.user.presentation.bloc import UserBloc
from clean_bloc.features.user.presentation.events import (
    FetchUser,
    RefreshUser,
    ResetUser,
    UserEvent,
)
from clean_bloc.features.user.presentation.states import (
    UserError,
    UserInitial,
    UserLoaded,
    UserLoading,
    UserState,
)

__all__ = [
    "FetchUser",
    "GetUser",
    "GetUserParams",
    "RefreshUser",
    "ResetUser",
    "User",
    "UserBloc",
    "UserError",
    "UserEvent",
    "UserInitial",
    "UserLoaded",
    "UserLoading",
    "UserState",
]
