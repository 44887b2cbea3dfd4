"""User domain: identity, credentials and their uniqueness rules."""

from keyward_identity.domain.user.aggregates import User
from keyward_identity.domain.user.exceptions import (
    EmailTakenError,
    InvalidEmailError,
    InvalidUsernameError,
    UsernameTakenError,
    UserNotFoundError,
)
from keyward_identity.domain.user.repositories import UserRepository
from keyward_identity.domain.user.value_objects import Email, Username

__all__ = [
    "Email",
    "EmailTakenError",
    "InvalidEmailError",
    "InvalidUsernameError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "Username",
    "UsernameTakenError",
]
