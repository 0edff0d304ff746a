"""
Request Password Reset Use Case

Issues a clinic password reset token.
"""

import hashlib
from datetime import timedelta
from typing import Optional

from libs.result import Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.token_generator import SecureTokenGenerator, TokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PasswordResetToken
from .dtos import PasswordResetRequested, RESET_REQUESTED_MESSAGE

DEFAULT_TTL = timedelta(hours=24)


class RequestPasswordResetUseCase:
    """
    Use case for requesting a clinic password reset.

    Business Rules:
    - Token is 32 random lowercase alphanumerics, stored as its SHA-256 hash
    - Token expires in 24 hours
    - No email enumeration (same response for valid/invalid emails)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Optional[Clock] = None,
        token_generator: Optional[TokenGenerator] = None,
        ttl: timedelta = DEFAULT_TTL,
    ):
        self.uow = uow
        self.clock = clock or SystemClock()
        self.token_generator = token_generator or SecureTokenGenerator()
        self.ttl = ttl

    async def execute(self, email: str) -> Result[PasswordResetRequested]:
        """
        Execute request password reset use case.

        Args:
            email: Clinic email address

        Returns:
            Result with the request status; token is set only if the clinic exists
        """
        valid_hours = int(self.ttl.total_seconds() // 3600)

        async with self.uow:
            clinic = await self.uow.clinics.get_by_email(email)

            if clinic is None:
                return Return.ok(
                    PasswordResetRequested(
                        status="sent",
                        message=RESET_REQUESTED_MESSAGE,
                        valid_hours=valid_hours,
                    )
                )

            # Only the SHA-256 hash is stored; the plain token goes out by email
            plain_token = self.token_generator.reset_token()
            token_hash = hashlib.sha256(plain_token.encode()).hexdigest()

            now = self.clock.now()
            reset_token = PasswordResetToken(
                clinic_id=clinic.id,
                token_hash=token_hash,
                used=False,
                created_at=now,
                expires_at=now + self.ttl,
            )
            await self.uow.password_reset_tokens.create(reset_token)

            await self.uow.commit()

            return Return.ok(
                PasswordResetRequested(
                    status="sent",
                    message=RESET_REQUESTED_MESSAGE,
                    token=plain_token,
                    email=clinic.email,
                    valid_hours=valid_hours,
                )
            )
