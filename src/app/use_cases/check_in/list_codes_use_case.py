"""
List Check-in Codes Use Cases

Dashboard views: full history of a clinic's codes and its current code.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ErrorCode

from .dtos import CheckInCodeInfo, ListCheckInCodesResponse


class ListCheckInCodesUseCase:
    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self, clinic_id: UUID) -> Result[ListCheckInCodesResponse]:
        async with self.uow:
            now = self.clock.now()
            codes = await self.uow.check_in_codes.list_by_clinic_id(clinic_id)
            return Return.ok(
                ListCheckInCodesResponse(
                    codes=[CheckInCodeInfo.from_entity(code, now) for code in codes]
                )
            )


class GetActiveCheckInCodeUseCase:
    """Returns the clinic's newest active, unexpired code"""

    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self, clinic_id: UUID) -> Result[CheckInCodeInfo]:
        async with self.uow:
            now = self.clock.now()
            code = await self.uow.check_in_codes.get_active_by_clinic_id(clinic_id, now)
            if code is None:
                return Return.err(
                    Error(ErrorCode.not_found.value, "No active check-in code")
                )
            return Return.ok(CheckInCodeInfo.from_entity(code, now))
