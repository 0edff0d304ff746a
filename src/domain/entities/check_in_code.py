"""
CheckInCode Entity

Short-lived clinic code that unlocks the public pet intake form.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class CheckInCode(SQLModel, table=True):
    """
    CheckInCode entity.

    Business Rules:
    - Format "PET" + 3 uppercase alphanumerics, not unique
    - Expires 8 hours after generation
    - Generating a new code deactivates the clinic's previous codes
    - Superseded codes are kept (active=False), deleted only explicitly
    """

    __tablename__ = "codes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    code: str = Field(max_length=16, index=True)
    clinic_id: UUID = Field(foreign_key="clinics.id", index=True)

    active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_codes_clinic_active", "clinic_id", "active"),
        Index("idx_codes_expires_at", "expires_at"),
    )
