"""Registration service for new user accounts."""

from __future__ import annotations

import logging

from keyward_identity.application.result import returns_result
from keyward_identity.domain.user import (
    Email,
    EmailTakenError,
    User,
    Username,
    UsernameTakenError,
    UserRepository,
)
from keyward_identity.services import PasswordHashingService, PasswordPolicy

logger = logging.getLogger(__name__)


class RegistrationService:
    """
    Application service for account registration.

    Uniqueness is checked username first, then email; only the first
    conflict is reported. The password policy is applied afterwards when
    ``enforce_password_policy`` is set; otherwise only the rules bcrypt
    needs (valid UTF-8, at most 72 bytes) are checked.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        password_policy: PasswordPolicy,
        enforce_password_policy: bool = True,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._password_policy = password_policy
        self._enforce_password_policy = enforce_password_policy

    @returns_result
    async def register(
        self,
        username: str,
        email: str,
        password: str,
    ) -> User:
        username_obj = Username(username)
        email_obj = Email(email)

        if await self._user_repo.exists_by_username(username_obj):
            raise UsernameTakenError(username_obj.value)

        if await self._user_repo.exists_by_email(email_obj):
            raise EmailTakenError(email_obj.value)

        if self._enforce_password_policy:
            violation = self._password_policy.validate(password)
        else:
            violation = self._password_policy.validate(
                password, rules=PasswordPolicy.HASHABLE_RULES
            )
        if violation is not None:
            raise violation

        password_hash = self._password_service.hash(password)
        user = User.create(username_obj, email_obj, password_hash)
        await self._user_repo.save(user)

        logger.info("User registered: %s", user.username)
        return user
