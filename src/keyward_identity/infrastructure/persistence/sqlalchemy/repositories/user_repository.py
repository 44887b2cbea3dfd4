"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Union

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from keyward_identity.domain.user import (
    Email,
    EmailTakenError,
    User,
    Username,
    UsernameTakenError,
    UserRepository,
)
from keyward_identity.infrastructure.persistence.sqlalchemy.errors import (
    translate_storage_errors,
)
from keyward_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _username_value(username: Union[str, Username]) -> str:
    return username.value if isinstance(username, Username) else username.strip()


def _email_value(email: Union[str, Email]) -> str:
    return email.value if isinstance(email, Email) else Email(email).value


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @translate_storage_errors
    async def find_by_username(self, username: Union[str, Username]) -> User | None:
        stmt = select(UserModel).where(UserModel.username == _username_value(username))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    @translate_storage_errors
    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        stmt = select(UserModel).where(UserModel.email == _email_value(email))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    @translate_storage_errors
    async def exists_by_username(self, username: Union[str, Username]) -> bool:
        stmt = select(
            exists().where(UserModel.username == _username_value(username)),
        )
        result = await self._session.execute(stmt)
        return bool(result.scalar())

    @translate_storage_errors
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        stmt = select(exists().where(UserModel.email == _email_value(email)))
        result = await self._session.execute(stmt)
        return bool(result.scalar())

    @translate_storage_errors
    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user)

        try:
            # Savepoint keeps the outer transaction usable after a conflict
            async with self._session.begin_nested():
                if existing:
                    self._update_model(existing, user)
                    logger.debug("Updated user: %s", user.id)
                else:
                    self._session.add(self._map_to_model(user))
                    logger.debug("Inserting user: %s", user.id)
        except IntegrityError as e:
            detail = str(e.orig).lower()
            if "username" in detail:
                raise UsernameTakenError(user.username) from e
            if "email" in detail:
                raise EmailTakenError(user.email) from e
            raise

    async def _find_model_by_id(self, user: User) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        # username and email are immutable after creation
        model.password_hash = user.password_hash
        model.updated_at = user.updated_at
