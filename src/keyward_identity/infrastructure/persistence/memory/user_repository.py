"""In-memory implementation of UserRepository."""

import threading
from typing import Optional, Union
from uuid import UUID

from keyward_identity.domain.user import (
    Email,
    EmailTakenError,
    User,
    Username,
    UsernameTakenError,
    UserRepository,
)


def _copy(user: User) -> User:
    return User.reconstitute(
        id=user.id,
        username=user.username,
        email=user.email,
        password_hash=user.password_hash,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


class InMemoryUserRepository(UserRepository):
    """
    In-memory user repository for testing and development.

    Stores copies, so changes to a returned ``User`` are only visible
    after ``save``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[UUID, User] = {}
        self._username_index: dict[str, UUID] = {}
        self._email_index: dict[str, UUID] = {}

    async def find_by_username(
        self,
        username: Union[str, Username],
    ) -> Optional[User]:
        key = username.value if isinstance(username, Username) else username.strip()
        with self._lock:
            user_id = self._username_index.get(key)
            return _copy(self._users[user_id]) if user_id else None

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        key = email.value if isinstance(email, Email) else Email(email).value
        with self._lock:
            user_id = self._email_index.get(key)
            return _copy(self._users[user_id]) if user_id else None

    async def exists_by_username(self, username: Union[str, Username]) -> bool:
        return await self.find_by_username(username) is not None

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        return await self.find_by_email(email) is not None

    async def save(self, user: User) -> None:
        with self._lock:
            owner = self._username_index.get(user.username)
            if owner is not None and owner != user.id:
                raise UsernameTakenError(user.username)

            owner = self._email_index.get(user.email)
            if owner is not None and owner != user.id:
                raise EmailTakenError(user.email)

            self._users[user.id] = _copy(user)
            self._username_index[user.username] = user.id
            self._email_index[user.email] = user.id
