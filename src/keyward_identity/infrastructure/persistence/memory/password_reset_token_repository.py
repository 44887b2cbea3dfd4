"""In-memory implementation of PasswordResetTokenRepository."""

import threading
from datetime import datetime
from uuid import UUID, uuid4

from keyward_identity.domain.shared.time import utc_now
from keyward_identity.repositories import (
    PasswordResetTokenData,
    PasswordResetTokenRepository,
)


class InMemoryPasswordResetTokenRepository(PasswordResetTokenRepository):
    """Tokens keyed by owner, so a user can never hold two."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tokens: dict[UUID, PasswordResetTokenData] = {}

    async def replace_for_user(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
    ) -> PasswordResetTokenData:
        token = PasswordResetTokenData(
            id=uuid4(),
            user_id=user_id,
            token_hash=token_hash,
            expires_at=expires_at,
            created_at=utc_now(),
        )
        with self._lock:
            self._tokens[user_id] = token
        return token

    async def consume(
        self,
        token_hash: str,
        user_id: UUID,
    ) -> PasswordResetTokenData | None:
        with self._lock:
            token = self._tokens.get(user_id)
            if token is None or token.token_hash != token_hash:
                return None
            return self._tokens.pop(user_id)

    async def find_by_user_id(self, user_id: UUID) -> PasswordResetTokenData | None:
        with self._lock:
            return self._tokens.get(user_id)

    async def delete_for_user(self, user_id: UUID) -> int:
        with self._lock:
            return 1 if self._tokens.pop(user_id, None) is not None else 0

    async def cleanup_expired(self, now: datetime) -> int:
        with self._lock:
            expired = [
                user_id
                for user_id, token in self._tokens.items()
                if token.is_expired(now)
            ]
            for user_id in expired:
                del self._tokens[user_id]
            return len(expired)
