"""Person model for Narrow Search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Person:
    """A known user, as supplied by the people roster."""

    full_name: str
    email: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Person":
        """Create from a roster entry."""
        return cls(full_name=data["full_name"], email=data["email"])

    def to_dict(self) -> dict[str, str]:
        return {"full_name": self.full_name, "email": self.email}
