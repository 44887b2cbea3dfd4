"""Value objects for the user domain."""

from keyward_identity.domain.user.value_objects.email import Email
from keyward_identity.domain.user.value_objects.username import Username

__all__ = [
    "Email",
    "Username",
]
