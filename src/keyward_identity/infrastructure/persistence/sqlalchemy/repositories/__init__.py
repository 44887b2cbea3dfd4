# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for identity management."""

from keyward_identity.infrastructure.persistence.sqlalchemy.repositories.password_reset_token_repository import (
    PasswordResetTokenRepositorySQLAlchemy,
)
from keyward_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "PasswordResetTokenRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
