"""
Verify Check-in Code Use Case

Admits a pet owner to the intake form of the clinic that issued the code.
"""

from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import redeem_failure
from src.domain.errors import ErrorCode

from .dtos import VerifyCheckInCodeResponse

INVALID_CODE_MESSAGE = "Invalid or expired code"


class VerifyCheckInCodeUseCase:
    """
    Use case for verifying a check-in code.

    Business Rules:
    - Valid iff a row with the code is active and now < expires_at
    - Success returns the owning clinic_id
    - Failure reports NOT_FOUND, ALREADY_CONSUMED (inactive) or EXPIRED
      with the same message; the API layer hides the difference
    """

    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self, code: str) -> Result[VerifyCheckInCodeResponse]:
        code = code.strip().upper()

        async with self.uow:
            now = self.clock.now()

            check_in_code = await self.uow.check_in_codes.get_valid_by_code(code, now)
            if check_in_code is not None:
                return Return.ok(
                    VerifyCheckInCodeResponse(
                        clinic_id=str(check_in_code.clinic_id),
                        code=check_in_code.code,
                        expires_at=check_in_code.expires_at.isoformat(),
                    )
                )

            # Work out why, for logs only
            latest = await self.uow.check_in_codes.get_latest_by_code(code)
            reason = ErrorCode.not_found
            if latest is not None:
                reason = (
                    redeem_failure(latest.expires_at, not latest.active, now)
                    or ErrorCode.not_found
                )

            return Return.err(Error(reason.value, INVALID_CODE_MESSAGE))
