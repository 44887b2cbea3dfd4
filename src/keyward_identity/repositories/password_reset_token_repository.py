"""Abstract repository interface for password reset tokens."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from keyward_identity.domain.shared.time import ensure_tz_aware


@dataclass(frozen=True)
class PasswordResetTokenData:
    """Immutable password reset token data."""

    id: UUID
    user_id: UUID
    token_hash: str
    expires_at: datetime
    created_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Check if the token has expired."""
        return ensure_tz_aware(self.expires_at) < ensure_tz_aware(now)


class PasswordResetTokenRepository(ABC):
    """Abstract repository for password reset tokens.

    A user owns at most one token. Implementations must make
    ``replace_for_user`` and ``consume`` atomic.

    The password flows only need ``replace_for_user``, ``consume`` and
    ``cleanup_expired``. ``find_by_user_id`` and ``delete_for_user`` are
    for the embedding application, e.g. to show whether a reset is
    pending or to revoke one when an account is locked.
    """

    @abstractmethod
    async def replace_for_user(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
    ) -> PasswordResetTokenData:
        """Store a new token for a user, discarding any previous one.

        Parameters
        ----------
        user_id
            The user's unique identifier
        token_hash
            SHA-256 hash of the raw token
        expires_at
            When the token expires

        Returns
        -------
        The stored token data
        """

    @abstractmethod
    async def consume(
        self,
        token_hash: str,
        user_id: UUID,
    ) -> PasswordResetTokenData | None:
        """Delete and return the token matching both hash and owner.

        Expired tokens are deleted and returned as well; callers decide
        whether the returned token is still usable.

        Parameters
        ----------
        token_hash
            SHA-256 hash of the raw token
        user_id
            The owner the token must belong to

        Returns
        -------
        The deleted token data, or None if nothing matched
        """

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> PasswordResetTokenData | None:
        """Find the token currently owned by a user.

        Parameters
        ----------
        user_id
            The user's unique identifier

        Returns
        -------
        Token data if the user has a token, None otherwise
        """

    @abstractmethod
    async def delete_for_user(self, user_id: UUID) -> int:
        """Delete the token owned by a user.

        Returns
        -------
        Number of tokens deleted (0 or 1)
        """

    @abstractmethod
    async def cleanup_expired(self, now: datetime) -> int:
        """Remove tokens that expired before ``now``.

        Returns
        -------
        Number of tokens deleted
        """
