"""
Pytest configuration for keyward_identity tests.

Provides cheap hashing (bcrypt rounds=4), the password policy, in-memory
stores and services wired around them.
"""

import pytest

from keyward_identity import (
    AuthenticationService,
    PasswordHashingService,
    PasswordLifecycleService,
    PasswordPolicy,
    RegistrationService,
    SessionTokenService,
)
from keyward_identity.infrastructure.persistence.memory import (
    InMemoryPasswordResetTokenRepository,
    InMemoryUserRepository,
)

TEST_SECRET_KEY = "test-secret-key-12345"


@pytest.fixture
def password_service() -> PasswordHashingService:
    """bcrypt with the minimum work factor, for fast tests."""
    return PasswordHashingService(rounds=4)


@pytest.fixture
def password_policy() -> PasswordPolicy:
    return PasswordPolicy()


@pytest.fixture
def session_token_service() -> SessionTokenService:
    return SessionTokenService(secret_key=TEST_SECRET_KEY)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def token_repository() -> InMemoryPasswordResetTokenRepository:
    return InMemoryPasswordResetTokenRepository()


@pytest.fixture
def registration_service(
    user_repository, password_service, password_policy
) -> RegistrationService:
    return RegistrationService(
        user_repository=user_repository,
        password_service=password_service,
        password_policy=password_policy,
    )


@pytest.fixture
def authentication_service(
    user_repository, password_service, session_token_service
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=user_repository,
        password_service=password_service,
        session_token_service=session_token_service,
    )


@pytest.fixture
def password_lifecycle_service(
    user_repository, token_repository, password_service, password_policy
) -> PasswordLifecycleService:
    return PasswordLifecycleService(
        user_repository=user_repository,
        token_repository=token_repository,
        password_service=password_service,
        password_policy=password_policy,
    )
