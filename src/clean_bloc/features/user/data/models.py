"""JSON representation of a user as served by the remote API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from clean_bloc.features.user.domain.entities import User


class UserModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1)
    age: int = Field(ge=0)

    @classmethod
    def from_json(cls, data: Any) -> UserModel:
        return cls.model_validate(data)

    @classmethod
    def from_entity(cls, user: User) -> UserModel:
        return cls(name=user.name, age=user.age)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_entity(self) -> User:
        return User(name=self.name, age=self.age)
