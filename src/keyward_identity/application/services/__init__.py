"""Application services for identity management."""

from keyward_identity.application.services.authentication_service import (
    AuthenticationService,
)
from keyward_identity.application.services.password_lifecycle_service import (
    PasswordLifecycleService,
)
from keyward_identity.application.services.registration_service import (
    RegistrationService,
)

__all__ = [
    "AuthenticationService",
    "PasswordLifecycleService",
    "RegistrationService",
]
