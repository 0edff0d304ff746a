"""
Delete Check-in Code Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ErrorCode

from .dtos import CheckInCodeStatusResponse


class DeleteCheckInCodeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, code_id: UUID) -> Result[CheckInCodeStatusResponse]:
        async with self.uow:
            deleted = await self.uow.check_in_codes.delete(code_id)
            if not deleted:
                return Return.err(
                    Error(ErrorCode.not_found.value, "Check-in code not found")
                )

            await self.uow.commit()

            return Return.ok(CheckInCodeStatusResponse(id=str(code_id), status="deleted"))
