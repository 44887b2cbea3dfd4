"""Integration tests for UserRepositorySQLAlchemy with Testcontainers PostgreSQL."""

import pytest

from keyward_identity import EmailTakenError, User, UsernameTakenError
from keyward_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

HASH = "$2b$04$hash"


@pytest.fixture
def user_repo(db_session):
    """Create UserRepository instance with the test session."""
    return UserRepositorySQLAlchemy(db_session)


@pytest.mark.integration
class TestUserRepositorySQLAlchemy:
    """Integration tests for UserRepositorySQLAlchemy."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_username(self, user_repo):
        """Can save and retrieve a user by username."""
        user = User.create("alice", "alice@x.com", HASH)

        await user_repo.save(user)
        found = await user_repo.find_by_username("alice")

        assert found is not None
        assert found.id == user.id
        assert found.email == "alice@x.com"
        assert found.password_hash == HASH

    @pytest.mark.asyncio
    async def test_find_by_email_case_insensitive(self, user_repo):
        await user_repo.save(User.create("alice", "alice@x.com", HASH))

        found = await user_repo.find_by_email("ALICE@X.COM")

        assert found is not None
        assert found.username == "alice"

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, user_repo):
        assert await user_repo.find_by_username("nobody") is None
        assert await user_repo.find_by_email("nobody@x.com") is None

    @pytest.mark.asyncio
    async def test_exists(self, user_repo):
        await user_repo.save(User.create("alice", "alice@x.com", HASH))

        assert await user_repo.exists_by_username("alice") is True
        assert await user_repo.exists_by_email("alice@x.com") is True
        assert await user_repo.exists_by_username("bob") is False
        assert await user_repo.exists_by_email("bob@x.com") is False

    @pytest.mark.asyncio
    async def test_update_password_hash(self, user_repo):
        user = User.create("alice", "alice@x.com", HASH)
        await user_repo.save(user)

        user.change_password_hash("$2b$04$changed")
        await user_repo.save(user)

        found = await user_repo.find_by_username("alice")
        assert found.password_hash == "$2b$04$changed"

    @pytest.mark.asyncio
    async def test_duplicate_username_maps_to_conflict(self, user_repo):
        await user_repo.save(User.create("alice", "alice@x.com", HASH))

        with pytest.raises(UsernameTakenError):
            await user_repo.save(User.create("alice", "other@x.com", HASH))

        # Session is still usable after the failed insert
        assert await user_repo.exists_by_username("alice")

    @pytest.mark.asyncio
    async def test_duplicate_email_maps_to_conflict(self, user_repo):
        await user_repo.save(User.create("alice", "alice@x.com", HASH))

        with pytest.raises(EmailTakenError):
            await user_repo.save(User.create("bob", "alice@x.com", HASH))
