"""Identity schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SessionToken:
    """Session credential returned after a successful login.

    Attributes
    ----------
    access_token
        The signed bearer token
    username
        The user the token is bound to
    expires_at
        When the token stops being accepted
    """

    access_token: str
    username: str
    expires_at: datetime

    def __repr__(self) -> str:
        return f"SessionToken(username={self.username!r}, expires_at={self.expires_at})"


@dataclass(frozen=True)
class SessionPayload:
    """Decoded session token payload."""

    username: str
    issued_at: datetime
    exp: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp
