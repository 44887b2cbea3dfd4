# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""In-memory repository implementations.

Data lives in dictionaries and is lost on restart. Each store guards its
state with a lock so compound operations stay atomic across threads.
"""

from keyward_identity.infrastructure.persistence.memory.password_reset_token_repository import (
    InMemoryPasswordResetTokenRepository,
)
from keyward_identity.infrastructure.persistence.memory.user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryPasswordResetTokenRepository",
    "InMemoryUserRepository",
]
