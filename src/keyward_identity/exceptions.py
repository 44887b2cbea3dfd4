"""Identity and credential lifecycle exceptions.

Every expected failure of the identity services is an ``IdentityError``
subclass tagged with an ``ErrorKind``. The application services return
these as ``Result`` failures instead of raising them to the caller.

``InfrastructureError`` is not an ``IdentityError``: storage
faults propagate as raised exceptions.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from keyward_identity.services.password_policy import PolicyRule


class ErrorKind(str, Enum):
    """Categories of expected identity failures."""

    VALIDATION = "validation"
    POLICY_VIOLATION = "policy_violation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    STATE = "state"
    AUTH = "auth"


class IdentityError(Exception):
    """Base exception for all expected identity failures."""

    kind: ErrorKind = ErrorKind.STATE
    default_message = "Identity error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(IdentityError):
    """Raised when an input value is malformed."""

    kind = ErrorKind.VALIDATION
    default_message = "Invalid input"


class PasswordPolicyViolation(IdentityError):
    """Raised when a password doesn't meet strength requirements."""

    kind = ErrorKind.POLICY_VIOLATION
    default_message = "Password does not meet requirements"

    def __init__(self, rule: PolicyRule, message: str | None = None):
        self.rule = rule
        super().__init__(message or rule.message)


class ConflictError(IdentityError):
    """Raised when a unique identity value is already taken."""

    kind = ErrorKind.CONFLICT
    default_message = "Resource already exists"


class NotFoundError(IdentityError):
    """Raised when a referenced user, email or token does not exist."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Not found"


class UnknownEmailError(NotFoundError):
    """Raised when no user is registered with the given email."""

    default_message = "No user found with this email address"


class InvalidResetTokenError(NotFoundError):
    """Raised when a reset token does not exist for the given user."""

    default_message = "Invalid or expired reset token"


class StateError(IdentityError):
    """Raised when a request conflicts with the current credential state."""

    kind = ErrorKind.STATE
    default_message = "Invalid state"


class TokenExpiredError(StateError):
    """Raised when a reset token is past its expiry date."""

    default_message = "Reset token has expired. Please request a new one."


class ConfirmationMismatchError(StateError):
    """Raised when the new password and its confirmation differ."""

    default_message = "New password and confirmation do not match"


class SameAsCurrentPasswordError(StateError):
    """Raised when the new password equals the current one."""

    default_message = "New password must be different from current password"


class WrongCurrentPasswordError(StateError):
    """Raised when the supplied current password is incorrect."""

    default_message = "Current password is incorrect"


class AuthError(IdentityError):
    """Base exception for authentication failures."""

    kind = ErrorKind.AUTH
    default_message = "Authentication error"


class InvalidCredentialsError(AuthError):
    """Raised when username or password is incorrect during login.

    The message never says which of the two was wrong.
    """

    default_message = "Invalid username or password"


class InvalidSessionTokenError(AuthError):
    """Raised when a session token is invalid, expired, or malformed."""

    default_message = "Invalid or expired session token"


class InfrastructureError(Exception):
    """Raised when a storage backend fails.

    The message is generic; the original exception is chained for operators.
    """

    def __init__(self, message: str = "Storage backend unavailable"):
        self.message = message
        super().__init__(self.message)
