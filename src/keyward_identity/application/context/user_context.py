"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from keyward_identity.domain.user import User
    from keyward_identity.schemas import SessionPayload


@dataclass(frozen=True)
class UserContext:
    """Immutable reference to the currently authenticated user."""

    username: str

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(username=user.username)

    @classmethod
    def from_session(cls, payload: SessionPayload) -> UserContext:
        return cls(username=payload.username)

    def __str__(self) -> str:
        return f"UserContext({self.username})"
