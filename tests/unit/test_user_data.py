"""Unit tests for the user data layer (model, remote data source, repository)."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests
from pydantic import ValidationError

from clean_bloc.features.user.data.data_sources import UserRemoteDataSource
from clean_bloc.features.user.data.models import UserModel
from clean_bloc.features.user.data.repositories import UserRepositoryImpl
from clean_bloc.features.user.domain.entities import User
from clean_bloc.features.user.domain.repositories import UserNotFoundError, UserServiceError


def _response(status_code: int, payload: object = None) -> Mock:
    resp = Mock(spec=requests.Response)
    resp.status_code = status_code
    resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return resp


def _data_source(resp: Mock | None = None, *, error: Exception | None = None) -> tuple:
    session = Mock(spec=requests.Session)
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = resp
    source = UserRemoteDataSource(
        base_url="http://users.test/", timeout_seconds=2.5, session=session
    )
    return source, session


def test_user_model_json_roundtrip() -> None:
    model = UserModel.from_json({"name": "John Doe", "age": 30, "email": "ignored@x"})

    assert model.to_entity() == User(name="John Doe", age=30)
    assert model.to_json() == {"name": "John Doe", "age": 30}
    assert UserModel.from_entity(User(name="A", age=1)).to_json() == {"name": "A", "age": 1}


@pytest.mark.parametrize(
    "payload",
    [{"name": "", "age": 1}, {"name": "A", "age": -1}, {"age": 3}, ["not", "a", "dict"]],
)
def test_user_model_rejects_invalid_payloads(payload: object) -> None:
    with pytest.raises(ValidationError):
        UserModel.from_json(payload)


def test_fetch_user_calls_expected_url() -> None:
    source, session = _data_source(_response(200, {"name": "John Doe", "age": 30}))

    model = source.fetch_user(1)

    assert model == UserModel(name="John Doe", age=30)
    session.get.assert_called_once()
    args, kwargs = session.get.call_args
    assert args == ("http://users.test/users/1",)
    assert kwargs["timeout"] == 2.5
    assert kwargs["headers"]["Accept"] == "application/json"


def test_fetch_user_maps_404_to_not_found() -> None:
    source, _ = _data_source(_response(404))

    with pytest.raises(UserNotFoundError) as exc_info:
        source.fetch_user(9)
    assert exc_info.value.user_id == 9


def test_fetch_user_raises_http_error_for_server_errors() -> None:
    source, _ = _data_source(_response(503))

    with pytest.raises(requests.HTTPError):
        source.fetch_user(1)


def test_fetch_user_rejects_non_positive_ids() -> None:
    source, session = _data_source(_response(200, {}))

    with pytest.raises(ValueError):
        source.fetch_user(0)
    session.get.assert_not_called()


def test_close_leaves_injected_session_open() -> None:
    source, session = _data_source(_response(200, {}))

    source.close()

    session.close.assert_not_called()


@pytest.mark.asyncio
async def test_repository_returns_entity() -> None:
    source, _ = _data_source(_response(200, {"name": "John Doe", "age": 30}))

    user = await UserRepositoryImpl(source).get_user(1)

    assert user == User(name="John Doe", age=30)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (requests.Timeout("read timed out"), TimeoutError),
        (requests.ConnectionError("refused"), ConnectionError),
    ],
)
async def test_repository_translates_transport_errors(
    error: Exception, expected: type[Exception]
) -> None:
    source, _ = _data_source(error=error)

    with pytest.raises(expected):
        await UserRepositoryImpl(source).get_user(1)


@pytest.mark.asyncio
async def test_repository_translates_http_errors() -> None:
    source, _ = _data_source(_response(500))

    with pytest.raises(UserServiceError):
        await UserRepositoryImpl(source).get_user(1)


@pytest.mark.asyncio
async def test_repository_lets_not_found_through() -> None:
    source, _ = _data_source(_response(404))

    with pytest.raises(UserNotFoundError):
        await UserRepositoryImpl(source).get_user(5)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        requests.TooManyRedirects("Exceeded 30 redirects."),
        requests.exceptions.ChunkedEncodingError("connection broken"),
        requests.exceptions.InvalidURL("bad url"),
    ],
)
async def test_repository_translates_other_request_errors(error: Exception) -> None:
    source, _ = _data_source(error=error)

    with pytest.raises(UserServiceError) as exc_info:
        await UserRepositoryImpl(source).get_user(1)
    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_repository_translates_malformed_json() -> None:
    resp = _response(200)
    resp.json.side_effect = requests.JSONDecodeError("Expecting value", "<html>", 0)
    source, _ = _data_source(resp)

    with pytest.raises(ValueError) as exc_info:
        await UserRepositoryImpl(source).get_user(1)
    assert not isinstance(exc_info.value, requests.RequestException)
