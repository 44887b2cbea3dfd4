"""User domain exceptions.

Validation and uniqueness failures raised by the user domain.
"""

from keyward_identity.exceptions import ConflictError, NotFoundError, ValidationError


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    default_message = "Invalid email address"


class InvalidUsernameError(ValidationError):
    """Raised when username format is invalid."""

    default_message = "Invalid username"


class UsernameTakenError(ConflictError):
    """Username already registered."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__("Username already exists")


class EmailTakenError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("Email already exists")


class UserNotFoundError(NotFoundError):
    """User not found."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__("User not found")
