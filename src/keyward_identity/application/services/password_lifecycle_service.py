"""Password change and forgot/reset password flows."""

from __future__ import annotations

import hashlib
import logging
import secrets
from collections.abc import Callable
from datetime import datetime, timedelta

from keyward_identity.application.context import UserContext
from keyward_identity.application.result import returns_result
from keyward_identity.domain.shared.time import utc_now
from keyward_identity.domain.user import User, UserNotFoundError, UserRepository
from keyward_identity.exceptions import (
    ConfirmationMismatchError,
    InvalidResetTokenError,
    SameAsCurrentPasswordError,
    TokenExpiredError,
    UnknownEmailError,
    WrongCurrentPasswordError,
)
from keyward_identity.repositories import PasswordResetTokenRepository
from keyward_identity.services import PasswordHashingService, PasswordPolicy

logger = logging.getLogger(__name__)


class PasswordLifecycleService:
    """Owns every change to an existing password hash and to reset tokens.

    Checks in each flow run in a fixed order and the first failing check
    is the one reported.
    """

    TOKEN_EXPIRY_HOURS = 1

    def __init__(  # noqa: PLR0913
        self,
        user_repository: UserRepository,
        token_repository: PasswordResetTokenRepository,
        password_service: PasswordHashingService,
        password_policy: PasswordPolicy,
        token_expiry: timedelta | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._user_repo = user_repository
        self._token_repo = token_repository
        self._password_service = password_service
        self._password_policy = password_policy
        self._token_expiry = token_expiry or timedelta(hours=self.TOKEN_EXPIRY_HOURS)
        self._clock = clock

    def _hash_token(self, raw_token: str) -> str:
        return hashlib.sha256(raw_token.encode()).hexdigest()

    def _check_new_password(self, new_password: str) -> None:
        violation = self._password_policy.validate(new_password)
        if violation is not None:
            raise violation

    async def _store_password(self, user: User, new_password: str) -> None:
        user.change_password_hash(self._password_service.hash(new_password))
        await self._user_repo.save(user)

    @returns_result
    async def change_password(
        self,
        user: UserContext,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> None:
        stored_user = await self._user_repo.find_by_username(user.username)
        if stored_user is None:
            raise UserNotFoundError(user.username)

        if not self._password_service.verify(
            current_password,
            stored_user.password_hash,
        ):
            raise WrongCurrentPasswordError

        if new_password != confirm_password:
            raise ConfirmationMismatchError

        if new_password == current_password:
            raise SameAsCurrentPasswordError

        self._check_new_password(new_password)

        await self._store_password(stored_user, new_password)
        logger.info("Password changed for user: %s", stored_user.username)

    @returns_result
    async def generate_reset_token(self, email: str) -> str:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise UnknownEmailError

        raw_token = secrets.token_urlsafe(32)
        expires_at = self._clock() + self._token_expiry

        # Replaces any earlier token of this user in one step
        await self._token_repo.replace_for_user(
            user_id=user.id,
            token_hash=self._hash_token(raw_token),
            expires_at=expires_at,
        )

        logger.info("Password reset token issued for user: %s", user.username)
        return raw_token

    @returns_result
    async def reset_password(
        self,
        email: str,
        token: str,
        new_password: str,
        confirm_password: str,
    ) -> None:
        if new_password != confirm_password:
            raise ConfirmationMismatchError("Passwords do not match")

        self._check_new_password(new_password)

        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise UnknownEmailError("Invalid email")

        # Deletes the token whether or not it is still valid
        reset_token = await self._token_repo.consume(self._hash_token(token), user.id)
        if reset_token is None:
            raise InvalidResetTokenError

        if reset_token.is_expired(self._clock()):
            logger.info("Expired reset token discarded for user: %s", user.username)
            raise TokenExpiredError

        await self._store_password(user, new_password)
        logger.info("Password reset completed for user: %s", user.username)

    async def cleanup_expired_tokens(self) -> int:
        """Delete every expired reset token and return how many were removed."""
        removed = await self._token_repo.cleanup_expired(self._clock())
        if removed:
            logger.info("Removed %d expired password reset tokens", removed)
        return removed
