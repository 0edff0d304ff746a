from datetime import datetime
from typing import Optional

from sqlalchemy import delete, func, or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.signup_code_repository import ISignupCodeRepository
from src.domain.entities import SignupCode


class SignupCodeRepository(ISignupCodeRepository):
    """SignupCode repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_code(self, code: str) -> Optional[SignupCode]:
        """Get signup code by code text"""
        stmt = select(SignupCode).where(SignupCode.code == code)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, signup_code: SignupCode) -> SignupCode:
        """Create a new signup code"""
        self.session.add(signup_code)
        await self.session.flush()
        await self.session.refresh(signup_code)
        return signup_code

    async def consume(self, code: str, now: datetime) -> bool:
        """Mark the code used iff it is unused and unexpired"""
        stmt = (
            update(SignupCode)
            .where(
                SignupCode.code == code,
                SignupCode.used == False,
                SignupCode.expires_at > now,
            )
            .values(used=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def delete_by_clinic_email(self, clinic_email: str) -> int:
        """Delete every signup code issued for an email"""
        stmt = delete(SignupCode).where(
            func.lower(SignupCode.clinic_email) == clinic_email.lower()
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_stale(self, now: datetime) -> int:
        """Delete used or expired signup codes"""
        stmt = delete(SignupCode).where(
            or_(SignupCode.used == True, SignupCode.expires_at <= now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
