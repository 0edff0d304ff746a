from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.check_in_code_repository import ICheckInCodeRepository
from src.domain.entities import CheckInCode


class CheckInCodeRepository(ICheckInCodeRepository):
    """CheckInCode repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_valid_by_code(self, code: str, now: datetime) -> Optional[CheckInCode]:
        """Get the newest active, unexpired row carrying this code"""
        stmt = (
            select(CheckInCode)
            .where(
                CheckInCode.code == code,
                CheckInCode.active == True,
                CheckInCode.expires_at > now,
            )
            .order_by(CheckInCode.created_at.desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_latest_by_code(self, code: str) -> Optional[CheckInCode]:
        """Get the newest row carrying this code regardless of state"""
        stmt = (
            select(CheckInCode)
            .where(CheckInCode.code == code)
            .order_by(CheckInCode.created_at.desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_active_by_clinic_id(
        self, clinic_id: UUID, now: datetime
    ) -> Optional[CheckInCode]:
        """Get the clinic's newest active, unexpired code"""
        stmt = (
            select(CheckInCode)
            .where(
                CheckInCode.clinic_id == clinic_id,
                CheckInCode.active == True,
                CheckInCode.expires_at > now,
            )
            .order_by(CheckInCode.created_at.desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_by_clinic_id(self, clinic_id: UUID) -> List[CheckInCode]:
        """Get all codes of a clinic, newest first"""
        stmt = (
            select(CheckInCode)
            .where(CheckInCode.clinic_id == clinic_id)
            .order_by(CheckInCode.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, code: CheckInCode) -> CheckInCode:
        """Create a new check-in code"""
        self.session.add(code)
        await self.session.flush()
        await self.session.refresh(code)
        return code

    async def deactivate_all_by_clinic_id(self, clinic_id: UUID) -> int:
        """Set active=False on every active code of a clinic"""
        stmt = (
            update(CheckInCode)
            .where(CheckInCode.clinic_id == clinic_id, CheckInCode.active == True)
            .values(active=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def deactivate(self, code_id: UUID) -> bool:
        """Set active=False on one code"""
        stmt = update(CheckInCode).where(CheckInCode.id == code_id).values(active=False)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete(self, code_id: UUID) -> bool:
        """Hard delete one code"""
        stmt = delete(CheckInCode).where(CheckInCode.id == code_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_clinic_id(self, clinic_id: UUID) -> int:
        """Delete every code of a clinic"""
        stmt = delete(CheckInCode).where(CheckInCode.clinic_id == clinic_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_stale(self, now: datetime) -> int:
        """Delete inactive or expired codes"""
        stmt = delete(CheckInCode).where(
            or_(CheckInCode.active == False, CheckInCode.expires_at <= now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
