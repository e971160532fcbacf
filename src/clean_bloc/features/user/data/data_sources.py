"""HTTP access to the user API.

This wraps requests so that transport details stay out of the repository and
tests can inject a session.
"""

from __future__ import annotations

import logging

import requests

from clean_bloc.features.user.domain.repositories import UserNotFoundError

from .models import UserModel

logger = logging.getLogger(__name__)


class UserRemoteDataSource:
    """Blocking client for `GET {base_url}/users/{user_id}`."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("base_url is required")

        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._headers = {
            "Accept": "application/json",
            "User-Agent": "clean-bloc",
        }

    @property
    def base_url(self) -> str:
        return self._base_url

    def _user_url(self, user_id: int) -> str:
        if user_id <= 0:
            raise ValueError("user_id must be a positive integer")
        return f"{self._base_url}/users/{user_id}"

    def fetch_user(self, user_id: int) -> UserModel:
        url = self._user_url(user_id)
        logger.debug("Fetching user", extra={"user_id": user_id, "url": url})

        resp = self._session.get(url, headers=self._headers, timeout=self._timeout)
        if resp.status_code == 404:
            raise UserNotFoundError(user_id)
        resp.raise_for_status()

        model = UserModel.from_json(resp.json())
        logger.info("User fetched", extra={"user_id": user_id})
        return model

    def close(self) -> None:
        if self._owns_session:
            self._session.close()
