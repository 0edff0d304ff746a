"""
Request Admin Password Reset Use Case

Issues an admin password reset token into the configured token store.
"""

import hashlib
from datetime import timedelta
from typing import Optional

from libs.result import Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.token_generator import SecureTokenGenerator, TokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import PasswordResetRequested, RESET_REQUESTED_MESSAGE
from src.domain.entities import AdminResetToken

DEFAULT_TTL = timedelta(hours=1)


class RequestAdminPasswordResetUseCase:
    """
    Use case for requesting an admin password reset.

    Business Rules:
    - Only an existing admin account gets a token
    - Token expires in 1 hour
    - Response never reveals whether the email is an admin
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
        valid_hours = max(1, int(self.ttl.total_seconds() // 3600))

        async with self.uow:
            admin = await self.uow.admins.get_by_email(email)

            if admin is None:
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
            reset_token = AdminResetToken(
                token_hash=token_hash,
                email=admin.email,
                used=False,
                created_at=now,
                expires_at=now + self.ttl,
            )
            await self.uow.admin_reset_tokens.add(reset_token)

            await self.uow.commit()

            return Return.ok(
                PasswordResetRequested(
                    status="sent",
                    message=RESET_REQUESTED_MESSAGE,
                    token=plain_token,
                    email=admin.email,
                    valid_hours=valid_hours,
                )
            )
