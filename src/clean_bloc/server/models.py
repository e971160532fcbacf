"""Pydantic models for the REST server."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

StateType = Literal["initial", "loading", "loaded", "error"]


class ApiUser(BaseModel):
    name: str
    age: int


class ApiUserState(BaseModel):
    type: StateType
    user_id: int | None = None
    user: ApiUser | None = None
    message: str | None = None
    code: str | None = None


class FetchUserResponse(BaseModel):
    user_id: int
    ok: bool
    states: list[ApiUserState] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str
    version: str
    event_policy: str
