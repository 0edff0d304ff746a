"""
SignupCode Entity

One-time code issued by an admin that pre-authorizes one clinic registration.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class SignupCode(SQLModel, table=True):
    """
    SignupCode entity.

    Business Rules:
    - Expires 24 hours after issue
    - Bound to a clinic name and email, compared case-insensitively
    - Consumed exactly once, when the clinic is created
    """

    __tablename__ = "clinic_signup_codes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    code: str = Field(unique=True, index=True, max_length=16)

    clinic_name: str = Field(max_length=255)
    clinic_email: str = Field(max_length=255, index=True)
    created_by: str = Field(max_length=255)

    used: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_signup_code_expires_at", "expires_at"),
        Index("idx_signup_code_used", "used"),
    )
