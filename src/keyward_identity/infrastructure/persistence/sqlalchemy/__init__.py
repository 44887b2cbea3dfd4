"""SQLAlchemy implementation for keyward_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel: SQLAlchemy model for users
- PasswordResetTokenModel: SQLAlchemy model for password reset tokens
- UserRepositorySQLAlchemy: Repository implementation for users
- PasswordResetTokenRepositorySQLAlchemy: Repository implementation for tokens
- Engine/session helpers
"""

from keyward_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from keyward_identity.infrastructure.persistence.sqlalchemy.database import (
    create_engine_from_settings,
    create_session_factory,
    create_tables,
    drop_tables,
    session_scope,
)
from keyward_identity.infrastructure.persistence.sqlalchemy.models import (
    PasswordResetTokenModel,
    UserModel,
)
from keyward_identity.infrastructure.persistence.sqlalchemy.repositories import (
    PasswordResetTokenRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "PasswordResetTokenModel",
    "PasswordResetTokenRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "create_engine_from_settings",
    "create_session_factory",
    "create_tables",
    "drop_tables",
    "session_scope",
]
