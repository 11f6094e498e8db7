"""Person record and Gender enumeration."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping, Optional


class Gender(str, Enum):
    M = "M"
    F = "F"


@dataclass
class Person:
    """Passive record; every field starts unset."""

    name: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[Gender] = None

    def copy(self) -> "Person":
        return replace(self)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "age": self.age,
            "gender": self.gender.value if self.gender is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Person":
        gender = data.get("gender")
        return cls(
            name=data.get("name"),
            age=data.get("age"),
            gender=Gender(gender) if gender is not None else None,
        )
