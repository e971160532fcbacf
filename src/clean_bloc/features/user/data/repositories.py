from __future__ import annotations

import asyncio

import requests

from clean_bloc.features.user.domain.entities import User
from clean_bloc.features.user.domain.repositories import UserServiceError

from .data_sources import UserRemoteDataSource


class UserRepositoryImpl:
    """`UserRepository` backed by the remote API.

    The blocking HTTP call runs in a worker thread so the event loop (and the
    bloc emitting "loading" states) is never blocked. Transport errors are
    translated so no `requests` exception reaches the domain layer.
    """

    def __init__(self, remote: UserRemoteDataSource) -> None:
        self._remote = remote

    async def get_user(self, user_id: int) -> User:
        try:
            model = await asyncio.to_thread(self._remote.fetch_user, user_id)
        except requests.Timeout as e:
            raise TimeoutError(str(e)) from e
        except requests.ConnectionError as e:
            raise ConnectionError(str(e)) from e
        except requests.HTTPError as e:
            raise UserServiceError(str(e)) from e
        except requests.JSONDecodeError as e:
            raise ValueError(f"Malformed user payload: {e}") from e
        except requests.RequestException as e:
            raise UserServiceError(str(e)) from e
        return model.to_entity()
