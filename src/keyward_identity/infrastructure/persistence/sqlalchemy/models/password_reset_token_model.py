"""SQLAlchemy model for password reset tokens."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from keyward_identity.domain.shared.time import utc_now
from keyward_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase


class PasswordResetTokenModel(IdentityBase):
    """One row per user at most; ``user_id`` is unique."""

    __tablename__ = "password_reset_tokens"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    token_hash: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    def __repr__(self) -> str:
        return (
            f"<PasswordResetTokenModel(id={self.id}, user_id={self.user_id}, "
            f"expires_at={self.expires_at})>"
        )
