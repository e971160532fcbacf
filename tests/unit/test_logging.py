"""Unit tests for structured logging."""

from __future__ import annotations

import io
import json
import logging
import sys

import pytest

from clean_bloc.core.bloc import Transition
from clean_bloc.core.failures import Failure, FailureCode
from clean_bloc.core.observer import LoggingBlocObserver
from clean_bloc.features.user.domain.entities import User
from clean_bloc.logging import JsonFormatter, configure_logging


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="clean_bloc.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record(user_id=7)))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "clean_bloc.test"
    assert payload["message"] == "hello world"
    assert payload["extra"] == {"user_id": 7}


def test_json_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in payload["exception"]


def test_configure_logging_replaces_root_handlers() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    stream = io.StringIO()
    try:
        configure_logging("warning", stream=stream)
        logging.getLogger("clean_bloc.test").warning("careful", extra={"n": 1})

        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
        assert json.loads(stream.getvalue())["extra"] == {"n": 1}
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_logging_observer_logs_transitions(caplog: pytest.LogCaptureFixture) -> None:
    observer = LoggingBlocObserver()
    transition = Transition(current_state="idle", event=object(), next_state="busy")

    with caplog.at_level(logging.INFO, logger="clean_bloc.core.observer"):
        observer.on_transition(object(), transition)  # type: ignore[arg-type]

    record = caplog.records[-1]
    assert record.getMessage() == "State transition"
    assert record.from_state == "str"
    assert record.to_state == "str"


def test_json_formatter_renders_domain_values() -> None:
    failure = Failure(message="Failed to fetch user", code=FailureCode.NETWORK)
    record = _record(code=FailureCode.NOT_FOUND, failure=failure, user=User("John Doe", 30))

    payload = json.loads(JsonFormatter().format(record))

    assert payload["extra"]["code"] == "not_found"
    assert payload["extra"]["failure"] == failure.to_json()
    assert payload["extra"]["user"] == {"name": "John Doe", "age": 30}


def test_json_formatter_lifts_task_name() -> None:
    record = _record()
    record.taskName = "UserBloc-events"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["task"] == "UserBloc-events"
    assert "extra" not in payload
