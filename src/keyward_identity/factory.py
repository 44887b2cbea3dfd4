"""Explicit wiring of the identity services."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from keyward_identity.application.services import (
    AuthenticationService,
    PasswordLifecycleService,
    RegistrationService,
)
from keyward_identity.infrastructure.persistence.sqlalchemy import (
    PasswordResetTokenRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from keyward_identity.services import (
    PasswordHashingService,
    PasswordPolicy,
    SessionTokenService,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from keyward_config import Settings
    from keyward_identity.domain.user import UserRepository
    from keyward_identity.repositories import PasswordResetTokenRepository

logger = logging.getLogger(__name__)


class IdentityServiceFactory:
    """Builds the identity application services around one pair of stores.

    Services are created on demand and cached for the factory's lifetime,
    which is meant to be one request (one session).
    """

    def __init__(
        self,
        settings: Settings,
        user_repository: UserRepository,
        token_repository: PasswordResetTokenRepository,
    ):
        self._settings = settings
        self._user_repo = user_repository
        self._token_repo = token_repository
        self._password_service = PasswordHashingService(rounds=settings.bcrypt_rounds)
        self._password_policy = PasswordPolicy()

        self._registration_service: RegistrationService | None = None
        self._authentication_service: AuthenticationService | None = None
        self._password_lifecycle_service: PasswordLifecycleService | None = None

    @classmethod
    def for_session(
        cls,
        session: AsyncSession,
        settings: Settings,
    ) -> IdentityServiceFactory:
        """Create a factory backed by SQLAlchemy repositories on ``session``."""
        return cls(
            settings=settings,
            user_repository=UserRepositorySQLAlchemy(session),
            token_repository=PasswordResetTokenRepositorySQLAlchemy(session),
        )

    def registration_service(self) -> RegistrationService:
        if self._registration_service is None:
            self._registration_service = RegistrationService(
                user_repository=self._user_repo,
                password_service=self._password_service,
                password_policy=self._password_policy,
                enforce_password_policy=(
                    self._settings.registration_enforce_password_policy
                ),
            )
        return self._registration_service

    def authentication_service(self) -> AuthenticationService:
        if self._authentication_service is None:
            self._authentication_service = AuthenticationService(
                user_repository=self._user_repo,
                password_service=self._password_service,
                session_token_service=SessionTokenService(
                    secret_key=self._settings.session_secret_key.get_secret_value(),
                    expire_hours=self._settings.session_token_expire_hours,
                ),
            )
        return self._authentication_service

    def password_lifecycle_service(self) -> PasswordLifecycleService:
        if self._password_lifecycle_service is None:
            self._password_lifecycle_service = PasswordLifecycleService(
                user_repository=self._user_repo,
                token_repository=self._token_repo,
                password_service=self._password_service,
                password_policy=self._password_policy,
                token_expiry=timedelta(
                    hours=self._settings.password_reset_token_expire_hours,
                ),
            )
        return self._password_lifecycle_service
