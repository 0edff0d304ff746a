"""
Admin reset token stores.

``InMemoryAdminResetTokenStore`` lives for the whole process and is shared by
every request. It is not shared between processes and does not survive a
restart, so it only suits single-instance deployments. ``SqlAdminResetTokenStore``
keeps the tokens in ``admin_reset_tokens`` and takes part in the request's
transaction.
"""

from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import delete, or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.admin_reset_token_store import IAdminResetTokenStore
from src.domain.entities import AdminResetToken, ResetTokenStorage


class InMemoryAdminResetTokenStore(IAdminResetTokenStore):
    storage = ResetTokenStorage.memory

    def __init__(self):
        self._tokens: Dict[str, AdminResetToken] = {}

    async def add(self, token: AdminResetToken) -> AdminResetToken:
        self._tokens[token.token_hash] = token
        return token

    async def get(self, token_hash: str) -> Optional[AdminResetToken]:
        return self._tokens.get(token_hash)

    async def consume(self, token_hash: str, now: datetime) -> bool:
        # No await between lookup and removal, so one caller wins per token
        record = self._tokens.get(token_hash)
        if record is None or record.used or not now < record.expires_at:
            return False
        del self._tokens[token_hash]
        return True

    async def delete(self, token_hash: str) -> None:
        self._tokens.pop(token_hash, None)

    async def sweep(self, now: datetime) -> int:
        stale = [
            key
            for key, record in self._tokens.items()
            if record.used or not now < record.expires_at
        ]
        for key in stale:
            del self._tokens[key]
        return len(stale)

    async def list_all(self) -> List[AdminResetToken]:
        return sorted(self._tokens.values(), key=lambda t: t.created_at, reverse=True)


class SqlAdminResetTokenStore(IAdminResetTokenStore):
    storage = ResetTokenStorage.database

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, token: AdminResetToken) -> AdminResetToken:
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def get(self, token_hash: str) -> Optional[AdminResetToken]:
        stmt = select(AdminResetToken).where(AdminResetToken.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def consume(self, token_hash: str, now: datetime) -> bool:
        stmt = (
            update(AdminResetToken)
            .where(
                AdminResetToken.token_hash == token_hash,
                AdminResetToken.used == False,
                AdminResetToken.expires_at > now,
            )
            .values(used=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def delete(self, token_hash: str) -> None:
        stmt = delete(AdminResetToken).where(AdminResetToken.token_hash == token_hash)
        await self.session.execute(stmt)
        await self.session.flush()

    async def sweep(self, now: datetime) -> int:
        stmt = delete(AdminResetToken).where(
            or_(AdminResetToken.used == True, AdminResetToken.expires_at <= now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def list_all(self) -> List[AdminResetToken]:
        stmt = select(AdminResetToken).order_by(AdminResetToken.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())
