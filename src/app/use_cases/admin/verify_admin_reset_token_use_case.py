"""
Verify Admin Reset Token Use Case
"""

import hashlib
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import INVALID_TOKEN_MESSAGE, ResetTokenDetails
from src.domain.base import redeem_failure
from src.domain.errors import ErrorCode


class VerifyAdminResetTokenUseCase:
    """
    Check an admin reset token without consuming it.

    A token found expired is removed from the store.
    """

    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self, token: str) -> Result[ResetTokenDetails]:
        token_hash = hashlib.sha256(token.encode()).hexdigest()

        async with self.uow:
            reset_token = await self.uow.admin_reset_tokens.get(token_hash)
            if reset_token is None:
                return Return.err(Error(ErrorCode.not_found.value, INVALID_TOKEN_MESSAGE))

            failure = redeem_failure(reset_token.expires_at, reset_token.used, self.clock.now())
            if failure == ErrorCode.expired:
                await self.uow.admin_reset_tokens.delete(token_hash)
                await self.uow.commit()
            if failure is not None:
                return Return.err(Error(failure.value, INVALID_TOKEN_MESSAGE))

            return Return.ok(
                ResetTokenDetails(
                    email=reset_token.email,
                    expires_at=reset_token.expires_at.isoformat(),
                )
            )
