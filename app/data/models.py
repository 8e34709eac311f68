from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping


def _coerce_id(value: Any) -> int:
    # bool is an int subclass; json `true` is not an id
    if isinstance(value, bool):
        raise ValueError(f"user id must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    raise ValueError(f"user id must be an integer, got {value!r}")


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str

    @classmethod
    def from_dict(cls, obj: Any) -> "User":
        """Build a User from a decoded JSON object, raising ValueError on shape drift."""
        if not isinstance(obj, Mapping):
            raise ValueError(f"user record must be an object, got {type(obj).__name__}")
        missing = [k for k in ("id", "name", "email") if k not in obj]
        if missing:
            raise ValueError(f"user record is missing {', '.join(missing)}")
        name, email = obj["name"], obj["email"]
        if not isinstance(name, str) or not isinstance(email, str):
            raise ValueError("user name and email must be strings")
        return cls(id=_coerce_id(obj["id"]), name=name, email=email)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class UserCandidate:
    """A user to be created. Both fields must be non-blank."""

    name: str
    email: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("name is required")
        if not self.email or not self.email.strip():
            raise ValueError("email is required")

    @classmethod
    def from_form(cls, name: str, email: str) -> "UserCandidate":
        return cls(name=(name or "").strip(), email=(email or "").strip())

    def to_payload(self) -> dict[str, str]:
        return {"name": self.name, "email": self.email}
