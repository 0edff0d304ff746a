from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.domain.entities import PasswordResetToken


class PasswordResetTokenRepository(IPasswordResetTokenRepository):
    """Clinic PasswordResetToken repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        """Get password reset token by token hash"""
        stmt = select(PasswordResetToken).where(PasswordResetToken.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def consume(self, token_hash: str, now: datetime) -> bool:
        """Mark the token used iff it is unused and unexpired"""
        stmt = (
            update(PasswordResetToken)
            .where(
                PasswordResetToken.token_hash == token_hash,
                PasswordResetToken.used == False,
                PasswordResetToken.expires_at > now,
            )
            .values(used=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def list_all(self) -> List[PasswordResetToken]:
        """Get all tokens, newest first"""
        stmt = select(PasswordResetToken).order_by(PasswordResetToken.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete_by_clinic_id(self, clinic_id: UUID) -> int:
        """Delete every token of a clinic"""
        stmt = delete(PasswordResetToken).where(PasswordResetToken.clinic_id == clinic_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_stale(self, now: datetime) -> int:
        """Delete used or expired tokens"""
        stmt = delete(PasswordResetToken).where(
            or_(PasswordResetToken.used == True, PasswordResetToken.expires_at <= now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
