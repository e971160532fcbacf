"""Failure descriptions carried by the error side of a Result."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FailureCode(str, Enum):
    NETWORK = "network"
    NOT_FOUND = "not_found"
    SERVER = "server"
    INVALID_DATA = "invalid_data"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True, slots=True)
class Failure:
    """Why an interaction did not succeed.

    `message` is meant for users and is always non-empty. `detail` keeps the
    underlying error text for logs.
    """

    message: str
    code: FailureCode = FailureCode.UNEXPECTED
    detail: str | None = None

    def __post_init__(self) -> None:
        if not self.message.strip():
            raise ValueError("Failure message must not be empty")

    def to_json(self) -> dict[str, object]:
        out: dict[str, object] = {"message": self.message, "code": self.code.value}
        if self.detail is not None:
            out["detail"] = self.detail
        return out
