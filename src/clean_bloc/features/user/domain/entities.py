from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    name: str
    age: int

    def to_json(self) -> dict[str, object]:
        return {"name": self.name, "age": self.age}
