"""Two-variant outcome of a single interaction.

A Result is either `Ok(value)` or `Err(failure)`. Which one is fixed at
construction; both are frozen. Callers branch with `fold` or with `match`:

    match result:
        case Ok(user):
            ...
        case Err(failure):
            ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from .failures import Failure

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def fold(self, on_ok: Callable[[T], R], on_err: Callable[[Failure], R]) -> R:
        return on_ok(self.value)

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))


@dataclass(frozen=True, slots=True)
class Err:
    failure: Failure

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def fold(self, on_ok: Callable[[object], R], on_err: Callable[[Failure], R]) -> R:
        return on_err(self.failure)

    def map(self, fn: Callable[[object], object]) -> Err:
        return self


Result = Ok[T] | Err


def fold(result: Result[T], on_ok: Callable[[T], R], on_err: Callable[[Failure], R]) -> R:
    """Invoke exactly one of `on_ok` / `on_err` and return its value."""

    return result.fold(on_ok, on_err)
