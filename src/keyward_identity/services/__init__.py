"""Identity services - password policy, hashing and session tokens."""

from keyward_identity.services.password_policy import PasswordPolicy, PolicyRule
from keyward_identity.services.password_service import PasswordHashingService
from keyward_identity.services.session_token_service import SessionTokenService

__all__ = [
    "PasswordHashingService",
    "PasswordPolicy",
    "PolicyRule",
    "SessionTokenService",
]
