from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.clinic_repository import IClinicRepository
from src.domain.entities import Clinic


class ClinicRepository(IClinicRepository):
    """Clinic repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, clinic_id: UUID) -> Optional[Clinic]:
        """Get clinic by ID"""
        stmt = select(Clinic).where(Clinic.id == clinic_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[Clinic]:
        """Get clinic by email address (case-insensitive)"""
        stmt = select(Clinic).where(func.lower(Clinic.email) == email.strip().lower())
        result = await self.session.exec(stmt)
        return result.first()

    async def list_all(self) -> List[Clinic]:
        """Get all clinics ordered by email"""
        stmt = select(Clinic).order_by(Clinic.email)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, clinic: Clinic) -> Clinic:
        """Create a new clinic"""
        self.session.add(clinic)
        await self.session.flush()
        await self.session.refresh(clinic)
        return clinic

    async def update(self, clinic: Clinic) -> Clinic:
        """Update existing clinic"""
        self.session.add(clinic)
        await self.session.flush()
        await self.session.refresh(clinic)
        return clinic

    async def delete(self, clinic: Clinic) -> None:
        """Delete a clinic"""
        await self.session.delete(clinic)
        await self.session.flush()
