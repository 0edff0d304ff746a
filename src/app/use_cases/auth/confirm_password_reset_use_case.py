"""
Confirm Password Reset Use Case

Handles clinic password reset confirmation.
"""

import hashlib
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import redeem_failure
from src.domain.errors import ErrorCode
from .dtos import ConfirmPasswordResetResponse, INVALID_TOKEN_MESSAGE


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming a clinic password reset.

    Business Rules:
    - New password must not be empty
    - Token must exist, be unused and unexpired
    - Token is claimed with a conditional update in the same transaction as
      the password change; a second submit fails as an invalid token
    """

    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self, token: str, new_password: str) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Password reset token (plain text from email)
            new_password: New password to set

        Returns:
            Result with confirmation status, or Error

        Errors:
            - VALIDATION_ERROR: Empty password
            - NOT_FOUND / EXPIRED / ALREADY_CONSUMED: token rejected
        """
        if not new_password:
            return Return.err(
                Error(ErrorCode.validation_error.value, "New password is required")
            )

        token_hash = hashlib.sha256(token.encode()).hexdigest()

        async with self.uow:
            now = self.clock.now()

            reset_token = await self.uow.password_reset_tokens.get_by_token_hash(token_hash)
            if reset_token is None:
                return Return.err(Error(ErrorCode.not_found.value, INVALID_TOKEN_MESSAGE))

            failure = redeem_failure(reset_token.expires_at, reset_token.used, now)
            if failure is not None:
                return Return.err(Error(failure.value, INVALID_TOKEN_MESSAGE))

            clinic = await self.uow.clinics.get_by_id(reset_token.clinic_id)
            if clinic is None:
                return Return.err(Error(ErrorCode.not_found.value, INVALID_TOKEN_MESSAGE))

            claimed = await self.uow.password_reset_tokens.consume(token_hash, now)
            if not claimed:
                return Return.err(
                    Error(ErrorCode.already_consumed.value, INVALID_TOKEN_MESSAGE)
                )

            clinic.password = new_password
            await self.uow.clinics.update(clinic)

            await self.uow.commit()

            return Return.ok(
                ConfirmPasswordResetResponse(
                    status="success",
                    message="Password has been reset successfully",
                )
            )
