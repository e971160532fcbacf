"""Event-driven state container.

A bloc holds one current state, accepts events through `add`, and runs
`handle` for each of them. Handlers produce states through the `Emitter`
they are given; every emitted state becomes the current state and is pushed
to all listeners and streams in emission order.

How events that arrive while a handler is still running are treated is set
per bloc with `EventPolicy`.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass
from enum import Enum
from functools import partial
from types import TracebackType
from typing import Any, Generic, TypeVar, cast

from blinker import Signal

from .errors import (
    BlocClosedError,
    EmitterClosedError,
    HandlerCancelledError,
    HandlerContractError,
)
from .observer import BlocObserver

logger = logging.getLogger(__name__)

E = TypeVar("E")
S = TypeVar("S")

_END_OF_STREAM = object()


class EventPolicy(str, Enum):
    SEQUENTIAL = "sequential"
    DROPPABLE = "droppable"
    RESTARTABLE = "restartable"


@dataclass(frozen=True, slots=True)
class Transition(Generic[E, S]):
    current_state: S
    event: E
    next_state: S


class Emitter(Generic[S]):
    """Per-event handle used by a handler to emit states.

    The emitter is closed once its handler returns or is cancelled; emitting
    on a closed emitter raises `EmitterClosedError`.
    """

    def __init__(self, sink: Callable[[S], None]) -> None:
        self._sink = sink
        self._closed = False
        self.count = 0

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    def __call__(self, state: S) -> None:
        if self._closed:
            raise EmitterClosedError(f"Cannot emit {type(state).__name__}: emitter is closed")
        self.count += 1
        self._sink(state)


class Bloc(ABC, Generic[E, S]):
    """Base class for state containers.

    Subclasses implement `handle`, usually as a `match` over a closed union of
    event types ending in `typing.assert_never`.

    `add` must be called from a running event loop. Exceptions escaping
    `handle` are logged and passed to `on_error`; they never stop the bloc or
    reach the caller of `add`.
    """

    def __init__(
        self,
        initial_state: S,
        *,
        policy: EventPolicy = EventPolicy.SEQUENTIAL,
        observer: BlocObserver | None = None,
    ) -> None:
        self._state = initial_state
        self._policy = EventPolicy(policy)
        self._observer = observer or BlocObserver()
        self._changed = Signal(f"{type(self).__name__}.state")
        self._streams: dict[asyncio.Queue[object], Callable[[], None]] = {}
        self._queue: asyncio.Queue[E] = asyncio.Queue()
        self._worker: asyncio.Task[None] | None = None
        self._tasks: dict[asyncio.Task[None], Emitter[S]] = {}
        self._closed = False

    @property
    def state(self) -> S:
        """The most recently emitted state."""

        return self._state

    @property
    def policy(self) -> EventPolicy:
        return self._policy

    @property
    def is_closed(self) -> bool:
        return self._closed

    @abstractmethod
    async def handle(self, event: E, emit: Emitter[S]) -> None: ...

    def on_transition(self, transition: Transition[E, S]) -> None:
        """Called for every emitted state, before listeners are notified."""

    def on_error(self, event: E, error: Exception) -> S | None:
        """Called when `handle` raises.

        Return a state to emit it as the terminal state for `event`.
        """

        return None

    def add(self, event: E) -> None:
        if self._closed:
            raise BlocClosedError(
                f"Cannot add {type(event).__name__}: {type(self).__name__} is closed"
            )
        self._observer.on_event(self, event)

        if self._policy is EventPolicy.SEQUENTIAL:
            self._queue.put_nowait(event)
            if self._worker is None or self._worker.done():
                self._worker = asyncio.get_running_loop().create_task(
                    self._drain_queue(), name=f"{type(self).__name__}-events"
                )
            return

        busy = any(not task.done() for task in self._tasks)
        if busy and self._policy is EventPolicy.DROPPABLE:
            logger.debug(
                "Dropping event while busy",
                extra={"bloc": type(self).__name__, "event": type(event).__name__},
            )
            self._observer.on_drop(self, event)
            return

        if busy:
            self._cancel_in_flight()

        emitter = self._new_emitter(event)
        task = asyncio.get_running_loop().create_task(self._process(event, emitter))
        self._tasks[task] = emitter
        task.add_done_callback(self._forget_task)

    def listen(self, callback: Callable[[S], None]) -> Callable[[], None]:
        """Call `callback` with every state emitted from now on.

        Returns a function that removes the listener.
        """

        def _receiver(sender: Any, *, state: S) -> None:
            try:
                callback(state)
            except Exception:
                logger.exception("State listener failed", extra={"bloc": type(self).__name__})

        self._changed.connect(_receiver, weak=False)
        return lambda: self._changed.disconnect(_receiver)

    def stream(self) -> AsyncIterator[S]:
        """Iterate over every state emitted after this call.

        The subscription starts immediately, not on first iteration, so states
        are buffered until they are consumed. A stream that is never iterated
        keeps buffering until the bloc is closed; `close` ends every stream
        and drops its subscription.
        """

        queue: asyncio.Queue[object] = asyncio.Queue()
        if self._closed:
            queue.put_nowait(_END_OF_STREAM)
        else:
            self._streams[queue] = self.listen(queue.put_nowait)
        return self._iterate(queue)

    async def settle(self) -> None:
        """Wait until every event added so far has been handled."""

        await self._queue.join()
        pending = [t for t in self._tasks if not t.done()]
        while pending:
            await asyncio.wait(pending)
            pending = [t for t in self._tasks if not t.done()]

    async def close(self) -> None:
        """Stop accepting events and end all streams.

        Queued and in-flight events are finished first, except under
        `EventPolicy.RESTARTABLE` where the in-flight handler is cancelled.
        """

        if self._closed:
            return
        self._closed = True

        if self._policy is EventPolicy.RESTARTABLE:
            self._cancel_in_flight()
        await self.settle()

        if self._worker is not None:
            self._worker.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._worker
            self._worker = None

        self._observer.on_close(self)
        for queue in list(self._streams):
            self._end_stream(queue)
            queue.put_nowait(_END_OF_STREAM)
        logger.debug("Bloc closed", extra={"bloc": type(self).__name__})

    async def __aenter__(self) -> Bloc[E, S]:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    def _new_emitter(self, event: E) -> Emitter[S]:
        return Emitter(partial(self._emit, event))

    def _emit(self, event: E, state: S) -> None:
        transition = Transition(current_state=self._state, event=event, next_state=state)
        self._state = state
        # Hooks must not keep an emitted state from its listeners.
        for hook in (self.on_transition, partial(self._observer.on_transition, self)):
            try:
                hook(transition)
            except Exception:
                logger.exception(
                    "Transition hook failed",
                    extra={"bloc": type(self).__name__, "event": type(event).__name__},
                )
        self._changed.send(self, state=state)

    def _forget_task(self, task: asyncio.Task[None]) -> None:
        self._tasks.pop(task, None)

    def _cancel_in_flight(self) -> None:
        for task, emitter in list(self._tasks.items()):
            # Close first so the cancelled handler cannot emit while unwinding.
            emitter.close()
            task.cancel()

    async def _drain_queue(self) -> None:
        while True:
            event = await self._queue.get()
            try:
                await self._process(event, self._new_emitter(event))
            finally:
                self._queue.task_done()

    async def _process(self, event: E, emitter: Emitter[S]) -> None:
        try:
            await self.handle(event, emitter)
            if emitter.count == 0:
                raise HandlerContractError(
                    f"{type(self).__name__} handled {type(event).__name__} without emitting a state"
                )
        except asyncio.CancelledError as e:
            task = asyncio.current_task()
            if emitter.is_closed or (task is not None and task.cancelling()):
                logger.debug(
                    "Event handler cancelled",
                    extra={"bloc": type(self).__name__, "event": type(event).__name__},
                )
                raise
            # A future the handler awaited was cancelled elsewhere.
            error = HandlerCancelledError(
                f"{type(self).__name__} handler for {type(event).__name__} was cancelled"
            )
            error.__cause__ = e
            logger.warning(
                "Event handler cancelled externally",
                extra={"bloc": type(self).__name__, "event": type(event).__name__},
            )
            self._recover(event, emitter, error)
        except Exception as e:
            logger.exception(
                "Event handler failed",
                extra={"bloc": type(self).__name__, "event": type(event).__name__},
            )
            self._recover(event, emitter, e)
        finally:
            emitter.close()

    def _recover(self, event: E, emitter: Emitter[S], error: Exception) -> None:
        try:
            self._observer.on_error(self, event, error)
            fallback = self.on_error(event, error)
            if fallback is not None and not emitter.is_closed:
                emitter(fallback)
        except Exception:
            logger.exception("Error hook failed", extra={"bloc": type(self).__name__})

    def _end_stream(self, queue: asyncio.Queue[object]) -> None:
        unsubscribe = self._streams.pop(queue, None)
        if unsubscribe is not None:
            unsubscribe()

    async def _iterate(self, queue: asyncio.Queue[object]) -> AsyncIterator[S]:
        try:
            while True:
                item = await queue.get()
                if item is _END_OF_STREAM:
                    return
                yield cast(S, item)
        finally:
            self._end_stream(queue)
