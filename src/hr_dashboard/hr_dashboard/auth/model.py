from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Credential:
    """One entry of the fixed login list (plaintext; mock only)."""

    email: str
    password: str
    name: str
    role: str


@dataclass(frozen=True)
class SessionUser:
    """What we store into the session after login (no password)."""

    email: str
    name: str
    role: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SessionUser":
        return cls(email=str(data["email"]), name=str(data["name"]), role=str(data["role"]))
