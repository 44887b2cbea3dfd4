"""Username value object."""

from dataclasses import dataclass

from keyward_identity.domain.user.exceptions import InvalidUsernameError

MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 50


@dataclass(frozen=True)
class Username:
    """Login name of a user.

    Surrounding whitespace is stripped; comparison is case sensitive.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            msg = "Username must be a string"
            raise InvalidUsernameError(msg)
        stripped = self.value.strip()
        if not MIN_USERNAME_LENGTH <= len(stripped) <= MAX_USERNAME_LENGTH:
            msg = (
                f"Username must be between {MIN_USERNAME_LENGTH} and "
                f"{MAX_USERNAME_LENGTH} characters"
            )
            raise InvalidUsernameError(msg)
        if any(ch.isspace() for ch in stripped):
            msg = "Username cannot contain whitespace"
            raise InvalidUsernameError(msg)
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value
