"""
Verify Password Reset Token Use Case

Read-only check used to decide whether to show the reset form.
"""

import hashlib
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import redeem_failure
from src.domain.errors import ErrorCode
from .dtos import INVALID_TOKEN_MESSAGE, ResetTokenDetails


class VerifyPasswordResetTokenUseCase:
    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self, token: str) -> Result[ResetTokenDetails]:
        token_hash = hashlib.sha256(token.encode()).hexdigest()

        async with self.uow:
            reset_token = await self.uow.password_reset_tokens.get_by_token_hash(token_hash)
            if reset_token is None:
                return Return.err(Error(ErrorCode.not_found.value, INVALID_TOKEN_MESSAGE))

            failure = redeem_failure(reset_token.expires_at, reset_token.used, self.clock.now())
            if failure is not None:
                return Return.err(Error(failure.value, INVALID_TOKEN_MESSAGE))

            clinic = await self.uow.clinics.get_by_id(reset_token.clinic_id)
            if clinic is None:
                return Return.err(Error(ErrorCode.not_found.value, INVALID_TOKEN_MESSAGE))

            return Return.ok(
                ResetTokenDetails(
                    email=clinic.email,
                    expires_at=reset_token.expires_at.isoformat(),
                )
            )
