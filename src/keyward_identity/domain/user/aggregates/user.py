"""User aggregate holding identity and the stored password hash."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from keyward_identity.domain.shared.time import utc_now
from keyward_identity.domain.user.value_objects import Email, Username


class User:
    """
    User aggregate root.

    ``username`` and ``email`` are fixed at creation. The password hash is
    replaced only through ``change_password_hash``.
    """

    def __init__(
        self,
        username: Union[str, Username],
        email: Union[str, Email],
        password_hash: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._username = (
            username if isinstance(username, Username) else Username(username)
        )
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def username(self) -> str:
        return self._username.value

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        username: Union[str, Username],
        email: Union[str, Email],
        password_hash: str,
    ) -> "User":
        return cls(username=username, email=email, password_hash=password_hash)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        username: str,
        email: str,
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            username=username,
            email=email,
            password_hash=password_hash,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username.value})"
