"""Authentication service for login and session validation."""

from __future__ import annotations

import logging
import secrets

from keyward_identity.application.context import UserContext
from keyward_identity.application.result import returns_result
from keyward_identity.domain.user import UserRepository
from keyward_identity.exceptions import InvalidCredentialsError
from keyward_identity.schemas import SessionToken
from keyward_identity.services import PasswordHashingService, SessionTokenService

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Verifies username and password against the stored bcrypt hash and
    issues a signed session token. Failures never reveal whether the
    username exists: unknown users are checked against a dummy hash so
    the bcrypt cost is paid either way, and the error is identical.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        session_token_service: SessionTokenService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._session_token_service = session_token_service
        self._dummy_hash: str | None = None

    def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._password_service.hash(secrets.token_urlsafe(16))
        return self._dummy_hash

    @returns_result
    async def authenticate(self, username: str, password: str) -> SessionToken:
        user = await self._user_repo.find_by_username(username.strip())

        if user is None:
            self._password_service.verify(password, self._get_dummy_hash())
            raise InvalidCredentialsError

        if not self._password_service.verify(password, user.password_hash):
            raise InvalidCredentialsError

        session = self._session_token_service.issue(user.username)

        logger.info("User logged in: %s", user.username)
        return session

    @returns_result
    async def validate_session(self, token: str) -> UserContext:
        payload = self._session_token_service.validate(token)
        return UserContext.from_session(payload)
