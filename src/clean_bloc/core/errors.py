"""Exception types raised by the state container machinery."""

from __future__ import annotations


class CleanBlocError(Exception):
    """Base exception for clean-bloc."""


class BlocClosedError(CleanBlocError):
    """Raised when an event is added to a closed bloc."""


class EmitterClosedError(CleanBlocError):
    """Raised when a handler emits after it finished or was cancelled."""


class HandlerContractError(CleanBlocError):
    """Raised when a handler completes without emitting any state."""


class HandlerCancelledError(CleanBlocError):
    """Raised when a handler is cancelled by something other than its bloc."""
