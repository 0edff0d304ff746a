"""
Confirm Admin Password Reset Use Case
"""

import hashlib
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import ConfirmPasswordResetResponse, INVALID_TOKEN_MESSAGE
from src.domain.base import redeem_failure
from src.domain.errors import ErrorCode


class ConfirmAdminPasswordResetUseCase:
    """
    Use case for confirming an admin password reset.

    Business Rules:
    - New password must not be empty
    - Token is claimed through the store before the password changes,
      so only one of two concurrent submits can succeed
    """

    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self, token: str, new_password: str) -> Result[ConfirmPasswordResetResponse]:
        if not new_password:
            return Return.err(
                Error(ErrorCode.validation_error.value, "New password is required")
            )

        token_hash = hashlib.sha256(token.encode()).hexdigest()

        async with self.uow:
            now = self.clock.now()

            reset_token = await self.uow.admin_reset_tokens.get(token_hash)
            if reset_token is None:
                return Return.err(Error(ErrorCode.not_found.value, INVALID_TOKEN_MESSAGE))

            failure = redeem_failure(reset_token.expires_at, reset_token.used, now)
            if failure is not None:
                return Return.err(Error(failure.value, INVALID_TOKEN_MESSAGE))

            admin = await self.uow.admins.get_by_email(reset_token.email)
            if admin is None:
                return Return.err(Error(ErrorCode.not_found.value, INVALID_TOKEN_MESSAGE))

            claimed = await self.uow.admin_reset_tokens.consume(token_hash, now)
            if not claimed:
                return Return.err(
                    Error(ErrorCode.already_consumed.value, INVALID_TOKEN_MESSAGE)
                )

            admin.password = new_password
            await self.uow.admins.update(admin)

            await self.uow.commit()

            return Return.ok(
                ConfirmPasswordResetResponse(
                    status="success",
                    message="Password has been reset successfully",
                )
            )
