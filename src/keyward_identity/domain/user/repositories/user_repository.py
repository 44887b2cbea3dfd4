"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from keyward_identity.domain.user.aggregates.user import User
from keyward_identity.domain.user.value_objects import Email, Username


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Lookups return ``None`` when nothing matches. Storage failures are
    raised as ``InfrastructureError``; implementations never retry.
    """

    @abstractmethod
    async def find_by_username(
        self,
        username: Union[str, Username],
    ) -> Optional[User]:
        """Find a user by their username."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def exists_by_username(self, username: Union[str, Username]) -> bool:
        """Check if a user exists with the given username."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert or update a user.

        Raises
        ------
        UsernameTakenError
            If another user already holds the username
        EmailTakenError
            If another user already holds the email
        """
