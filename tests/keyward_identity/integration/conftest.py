"""
Pytest configuration for keyward_identity integration tests.

Integration tests use Testcontainers for an ephemeral PostgreSQL instance.
Import the shared fixtures to make them available.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    async_engine,
    database_url,
    db_session,
    postgres_container,
    session_factory,
)

__all__ = [
    "async_engine",
    "database_url",
    "db_session",
    "postgres_container",
    "session_factory",
]
