"""
Clinic Entity

A veterinary clinic account. Created only by redeeming a signup code.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Clinic(SQLModel, table=True):
    """
    Clinic entity.

    Business Rules:
    - Email is unique across clinics
    - Password is stored as entered (no hashing in this product)
    """

    __tablename__ = "clinics"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password: str = Field(max_length=255)

    contact_person: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    zip: Optional[str] = Field(default=None, max_length=20)
    phone: Optional[str] = Field(default=None, max_length=50)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
