"""
PasswordResetToken Entity

Clinic password reset tokens.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity - clinic password reset tokens.

    Business Rules:
    - Expires after 24 hours
    - Stored as the SHA-256 hash of the emailed token
    - Single-use: marked as used after the password is changed
    """

    __tablename__ = "password_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    clinic_id: UUID = Field(foreign_key="clinics.id", index=True)
    token_hash: str = Field(unique=True, index=True, max_length=64)  # SHA-256 hex

    used: bool = Field(default=False)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_password_reset_expires_at", "expires_at"),
        Index("idx_password_reset_used", "used"),
    )
