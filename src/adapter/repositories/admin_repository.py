from typing import Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.admin_repository import IAdminRepository
from src.domain.entities import Admin


class AdminRepository(IAdminRepository):
    """Admin repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[Admin]:
        """Get admin by email address (case-insensitive)"""
        stmt = select(Admin).where(func.lower(Admin.email) == email.strip().lower())
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, admin: Admin) -> Admin:
        """Create a new admin"""
        self.session.add(admin)
        await self.session.flush()
        await self.session.refresh(admin)
        return admin

    async def update(self, admin: Admin) -> Admin:
        """Update existing admin"""
        self.session.add(admin)
        await self.session.flush()
        await self.session.refresh(admin)
        return admin
