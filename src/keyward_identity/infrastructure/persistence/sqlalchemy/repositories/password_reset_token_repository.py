"""SQLAlchemy implementation of PasswordResetTokenRepository.

Relies on PostgreSQL ``INSERT ... ON CONFLICT`` and ``DELETE ... RETURNING``
so that replacing and consuming a token are single statements.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from keyward_identity.domain.shared.time import utc_now
from keyward_identity.infrastructure.persistence.sqlalchemy.errors import (
    translate_storage_errors,
)
from keyward_identity.infrastructure.persistence.sqlalchemy.models import (
    PasswordResetTokenModel,
)
from keyward_identity.repositories import (
    PasswordResetTokenData,
    PasswordResetTokenRepository,
)

_TOKEN_COLUMNS = (
    PasswordResetTokenModel.id,
    PasswordResetTokenModel.user_id,
    PasswordResetTokenModel.token_hash,
    PasswordResetTokenModel.expires_at,
    PasswordResetTokenModel.created_at,
)


class PasswordResetTokenRepositorySQLAlchemy(PasswordResetTokenRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    @translate_storage_errors
    async def replace_for_user(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
    ) -> PasswordResetTokenData:
        values = {
            "id": uuid4(),
            "token_hash": token_hash,
            "expires_at": expires_at,
            "created_at": utc_now(),
        }
        stmt = (
            pg_insert(PasswordResetTokenModel)
            .values(user_id=user_id, **values)
            .on_conflict_do_update(
                index_elements=[PasswordResetTokenModel.user_id],
                set_=values,
            )
        )
        await self._session.execute(stmt)

        return PasswordResetTokenData(user_id=user_id, **values)

    @translate_storage_errors
    async def consume(
        self,
        token_hash: str,
        user_id: UUID,
    ) -> PasswordResetTokenData | None:
        stmt = (
            delete(PasswordResetTokenModel)
            .where(
                PasswordResetTokenModel.token_hash == token_hash,
                PasswordResetTokenModel.user_id == user_id,
            )
            .returning(*_TOKEN_COLUMNS)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None

        return self._row_to_data(row)

    @translate_storage_errors
    async def find_by_user_id(self, user_id: UUID) -> PasswordResetTokenData | None:
        stmt = select(*_TOKEN_COLUMNS).where(
            PasswordResetTokenModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None

        return self._row_to_data(row)

    @translate_storage_errors
    async def delete_for_user(self, user_id: UUID) -> int:
        stmt = (
            delete(PasswordResetTokenModel)
            .where(PasswordResetTokenModel.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]

    @translate_storage_errors
    async def cleanup_expired(self, now: datetime) -> int:
        stmt = (
            delete(PasswordResetTokenModel)
            .where(PasswordResetTokenModel.expires_at < now)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]

    def _row_to_data(self, row) -> PasswordResetTokenData:
        return PasswordResetTokenData(
            id=row.id,
            user_id=row.user_id,
            token_hash=row.token_hash,
            expires_at=row.expires_at,
            created_at=row.created_at,
        )
