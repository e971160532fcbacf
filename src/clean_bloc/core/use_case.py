"""Single-purpose interactions that return a Result instead of raising."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

from .failures import Failure, FailureCode
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)

P = TypeVar("P")
T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class NoParams:
    """Parameters for use cases that take none."""


class UseCase(ABC, Generic[P, T]):
    """Perform exactly one external interaction.

    Subclasses implement `execute` and may raise whatever their collaborator
    raises. Calling the use case catches any `Exception` and converts it into
    `Err(Failure(...))`, so nothing escapes past this boundary. Cancellation is
    not an `Exception` and still propagates.
    """

    failure_message: ClassVar[str] = "Something went wrong"

    @abstractmethod
    async def execute(self, params: P) -> T: ...

    def classify(self, error: Exception) -> FailureCode:
        """Map a collaborator error onto a failure code."""

        if isinstance(error, LookupError):
            return FailureCode.NOT_FOUND
        if isinstance(error, (ConnectionError, TimeoutError)):
            return FailureCode.NETWORK
        if isinstance(error, ValueError):
            return FailureCode.INVALID_DATA
        return FailureCode.UNEXPECTED

    async def __call__(self, params: P) -> Result[T]:
        name = type(self).__name__
        logger.debug("Use case started", extra={"use_case": name})
        try:
            value = await self.execute(params)
        except Exception as e:
            code = self.classify(e)
            logger.warning(
                "Use case failed",
                extra={"use_case": name, "code": code.value, "error": repr(e)},
            )
            return Err(Failure(message=self.failure_message, code=code, detail=str(e) or None))
        return Ok(value)
