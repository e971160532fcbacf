from __future__ import annotations

from dataclasses import dataclass

from clean_bloc.core.failures import FailureCode
from clean_bloc.features.user.domain.entities import User


@dataclass(frozen=True, slots=True)
class UserInitial:
    def to_json(self) -> dict[str, object]:
        return {"type": "initial"}


@dataclass(frozen=True, slots=True)
class UserLoading:
    user_id: int

    def to_json(self) -> dict[str, object]:
        return {"type": "loading", "user_id": self.user_id}


@dataclass(frozen=True, slots=True)
class UserLoaded:
    user: User

    def to_json(self) -> dict[str, object]:
        return {"type": "loaded", "user": self.user.to_json()}


@dataclass(frozen=True, slots=True)
class UserError:
    message: str
    code: FailureCode | None = None

    def to_json(self) -> dict[str, object]:
        out: dict[str, object] = {"type": "error", "message": self.message}
        if self.code is not None:
            out["code"] = self.code.value
        return out


UserState = UserInitial | UserLoading | UserLoaded | UserError
