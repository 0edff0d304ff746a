"""
Admin Entity
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Admin(SQLModel, table=True):
    """Operator of the admin area. Seeded from configuration at start-up."""

    __tablename__ = "admins"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password: str = Field(max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
