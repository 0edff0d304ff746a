"""
Verify Signup Code Use Case

First step of clinic registration: checks the code and returns the clinic
name and email to pre-fill the registration form.
"""

from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import redeem_failure
from src.domain.errors import ErrorCode

from .dtos import SignupCodeInfo

INVALID_CODE_MESSAGE = "Invalid or expired code"


class VerifySignupCodeUseCase:
    """
    Use case for verifying a signup code.

    Business Rules:
    - Valid iff the code exists, is unused and now < expires_at
    - Does not consume the code
    - CONFLICT if a clinic with the code's email exists meanwhile
    """

    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self, code: str) -> Result[SignupCodeInfo]:
        code = code.strip().upper()

        async with self.uow:
            signup_code = await self.uow.signup_codes.get_by_code(code)
            if signup_code is None:
                return Return.err(Error(ErrorCode.not_found.value, INVALID_CODE_MESSAGE))

            failure = redeem_failure(
                signup_code.expires_at, signup_code.used, self.clock.now()
            )
            if failure is not None:
                return Return.err(Error(failure.value, INVALID_CODE_MESSAGE))

            existing_clinic = await self.uow.clinics.get_by_email(signup_code.clinic_email)
            if existing_clinic is not None:
                return Return.err(
                    Error(ErrorCode.conflict.value, "A clinic with this email already exists")
                )

            return Return.ok(
                SignupCodeInfo(
                    code=signup_code.code,
                    clinic_name=signup_code.clinic_name,
                    clinic_email=signup_code.clinic_email,
                    expires_at=signup_code.expires_at.isoformat(),
                )
            )
