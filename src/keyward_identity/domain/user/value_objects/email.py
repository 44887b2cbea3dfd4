"""Email value object."""

import re
from dataclasses import dataclass

from keyward_identity.domain.user.exceptions import InvalidEmailError

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")
MAX_EMAIL_LENGTH = 255


@dataclass(frozen=True)
class Email:
    """Normalised email address.

    Emails are stripped and lower-cased so that lookups are case
    insensitive.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            msg = "Email must be a string"
            raise InvalidEmailError(msg)
        normalized = self.value.strip().lower()
        if not normalized or len(normalized) > MAX_EMAIL_LENGTH:
            msg = "Email must be between 1 and 255 characters"
            raise InvalidEmailError(msg)
        if not _EMAIL_PATTERN.match(normalized):
            msg = "Invalid email format"
            raise InvalidEmailError(msg)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
