"""Observers receive lifecycle callbacks from the blocs they are passed to.

There is no global observer: each bloc gets its observer through its
constructor, typically from the composition root.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .bloc import Bloc, Transition

logger = logging.getLogger(__name__)


class BlocObserver:
    """No-op base; override the callbacks you care about."""

    def on_event(self, bloc: Bloc[Any, Any], event: object) -> None:
        pass

    def on_transition(self, bloc: Bloc[Any, Any], transition: Transition[Any, Any]) -> None:
        pass

    def on_error(self, bloc: Bloc[Any, Any], event: object, error: Exception) -> None:
        pass

    def on_drop(self, bloc: Bloc[Any, Any], event: object) -> None:
        pass

    def on_close(self, bloc: Bloc[Any, Any]) -> None:
        pass


class LoggingBlocObserver(BlocObserver):
    """Log every bloc callback with structured `extra` fields."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def on_event(self, bloc: Bloc[Any, Any], event: object) -> None:
        self._log.debug(
            "Event added", extra={"bloc": type(bloc).__name__, "event": type(event).__name__}
        )

    def on_transition(self, bloc: Bloc[Any, Any], transition: Transition[Any, Any]) -> None:
        self._log.info(
            "State transition",
            extra={
                "bloc": type(bloc).__name__,
                "event": type(transition.event).__name__,
                "from_state": type(transition.current_state).__name__,
                "to_state": type(transition.next_state).__name__,
            },
        )

    def on_error(self, bloc: Bloc[Any, Any], event: object, error: Exception) -> None:
        self._log.error(
            "Event handling failed",
            extra={
                "bloc": type(bloc).__name__,
                "event": type(event).__name__,
                "error": repr(error),
            },
        )

    def on_drop(self, bloc: Bloc[Any, Any], event: object) -> None:
        self._log.debug(
            "Event dropped", extra={"bloc": type(bloc).__name__, "event": type(event).__name__}
        )

    def on_close(self, bloc: Bloc[Any, Any]) -> None:
        self._log.debug("Bloc closed", extra={"bloc": type(bloc).__name__})
