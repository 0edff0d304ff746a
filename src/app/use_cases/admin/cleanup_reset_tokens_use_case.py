"""
Cleanup Reset Tokens Use Case

Removes used or expired reset tokens from both the admin store and the
clinic table.
"""

from typing import Optional

from libs.result import Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from .dtos import CleanupResetTokensResponse


class CleanupResetTokensUseCase:
    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self) -> Result[CleanupResetTokensResponse]:
        async with self.uow:
            now = self.clock.now()

            admin_removed = await self.uow.admin_reset_tokens.sweep(now)
            clinic_removed = await self.uow.password_reset_tokens.delete_stale(now)

            await self.uow.commit()

            return Return.ok(
                CleanupResetTokensResponse(
                    admin_removed=admin_removed,
                    clinic_removed=clinic_removed,
                )
            )
