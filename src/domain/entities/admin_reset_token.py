"""
AdminResetToken Entity

Admin password reset tokens. Persisted in ``admin_reset_tokens`` when the
database store is configured; the in-memory store keeps the same objects in a
dict without ever adding them to a session.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class AdminResetToken(SQLModel, table=True):
    __tablename__ = "admin_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    token_hash: str = Field(unique=True, index=True, max_length=64)  # SHA-256 hex
    email: str = Field(max_length=255)

    used: bool = Field(default=False)

    expires_at: datetime = Field(sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_admin_reset_expires_at", "expires_at"),)
