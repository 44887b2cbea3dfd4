"""Keyward Identity - credential and reset token lifecycle.

This package handles:
- Account registration (unique username and email, bcrypt hashes)
- Authentication (login, signed session tokens)
- Password management (change password, forgot/reset password)
- Password strength policy

Storage is pluggable through ``UserRepository`` and
``PasswordResetTokenRepository``; SQLAlchemy and in-memory
implementations live under ``keyward_identity.infrastructure``.
"""

from keyward_identity.exceptions import (
    AuthError,
    ConfirmationMismatchError,
    ConflictError,
    ErrorKind,
    IdentityError,
    InfrastructureError,
    InvalidCredentialsError,
    InvalidResetTokenError,
    InvalidSessionTokenError,
    NotFoundError,
    PasswordPolicyViolation,
    SameAsCurrentPasswordError,
    StateError,
    TokenExpiredError,
    UnknownEmailError,
    ValidationError,
    WrongCurrentPasswordError,
)
from keyward_identity.domain.user import (
    Email,
    EmailTakenError,
    InvalidEmailError,
    InvalidUsernameError,
    User,
    Username,
    UsernameTakenError,
    UserNotFoundError,
    UserRepository,
)
from keyward_identity.repositories import (
    PasswordResetTokenData,
    PasswordResetTokenRepository,
)
from keyward_identity.schemas import SessionPayload, SessionToken
from keyward_identity.services import (
    PasswordHashingService,
    PasswordPolicy,
    PolicyRule,
    SessionTokenService,
)
from keyward_identity.application.context import UserContext
from keyward_identity.application.result import Result
from keyward_identity.application.services import (
    AuthenticationService,
    PasswordLifecycleService,
    RegistrationService,
)

__all__ = [
    # Domain - User
    "Email",
    "EmailTakenError",
    "InvalidEmailError",
    "InvalidUsernameError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "Username",
    "UsernameTakenError",
    # Exceptions
    "AuthError",
    "ConfirmationMismatchError",
    "ConflictError",
    "ErrorKind",
    "IdentityError",
    "InfrastructureError",
    "InvalidCredentialsError",
    "InvalidResetTokenError",
    "InvalidSessionTokenError",
    "NotFoundError",
    "PasswordPolicyViolation",
    "SameAsCurrentPasswordError",
    "StateError",
    "TokenExpiredError",
    "UnknownEmailError",
    "ValidationError",
    "WrongCurrentPasswordError",
    # Repositories
    "PasswordResetTokenData",
    "PasswordResetTokenRepository",
    # Schemas
    "SessionPayload",
    "SessionToken",
    # Services
    "PasswordHashingService",
    "PasswordPolicy",
    "PolicyRule",
    "SessionTokenService",
    # Application
    "AuthenticationService",
    "PasswordLifecycleService",
    "RegistrationService",
    "Result",
    "UserContext",
]
