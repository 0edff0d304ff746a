"""
Cleanup Check-in Codes Use Case

Expiry is only checked lazily on verification; this removes dead rows on demand.
"""

from typing import Optional

from libs.result import Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork

from .dtos import CleanupResponse


class CleanupCheckInCodesUseCase:
    """Deletes inactive and expired check-in codes"""

    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self) -> Result[CleanupResponse]:
        async with self.uow:
            removed = await self.uow.check_in_codes.delete_stale(self.clock.now())
            await self.uow.commit()
            return Return.ok(CleanupResponse(removed=removed))
