from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FetchUser:
    user_id: int


@dataclass(frozen=True, slots=True)
class RefreshUser:
    """Fetch the most recently requested user again."""


@dataclass(frozen=True, slots=True)
class ResetUser:
    pass


UserEvent = FetchUser | RefreshUser | ResetUser
