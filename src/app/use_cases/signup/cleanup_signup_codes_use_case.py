"""
Cleanup Signup Codes Use Case
"""

from typing import Optional

from libs.result import Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.check_in.dtos import CleanupResponse


class CleanupSignupCodesUseCase:
    """Deletes used and expired signup codes"""

    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self) -> Result[CleanupResponse]:
        async with self.uow:
            removed = await self.uow.signup_codes.delete_stale(self.clock.now())
            await self.uow.commit()
            return Return.ok(CleanupResponse(removed=removed))
