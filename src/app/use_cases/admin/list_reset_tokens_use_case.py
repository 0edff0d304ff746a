"""
List Reset Tokens Use Case

Admin debug view of outstanding admin and clinic reset tokens.
"""

from datetime import datetime
from typing import Optional

from libs.result import Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ListResetTokensResponse, ResetTokenSummary


def mask_token(value: str) -> str:
    """Keep the first and last three characters: ``abc...xyz``"""
    if len(value) <= 6:
        return "***"
    return f"{value[:3]}...{value[-3:]}"


def _status(used: bool, expires_at: datetime, now: datetime) -> str:
    if used:
        return "used"
    if not now < expires_at:
        return "expired"
    return "valid"


class ListResetTokensUseCase:
    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self) -> Result[ListResetTokensResponse]:
        async with self.uow:
            now = self.clock.now()
            tokens = []

            for admin_token in await self.uow.admin_reset_tokens.list_all():
                tokens.append(
                    ResetTokenSummary(
                        kind="admin",
                        token_hash=mask_token(admin_token.token_hash),
                        email=admin_token.email,
                        status=_status(admin_token.used, admin_token.expires_at, now),
                        created_at=admin_token.created_at.isoformat(),
                        expires_at=admin_token.expires_at.isoformat(),
                    )
                )

            for clinic_token in await self.uow.password_reset_tokens.list_all():
                tokens.append(
                    ResetTokenSummary(
                        kind="clinic",
                        token_hash=mask_token(clinic_token.token_hash),
                        clinic_id=str(clinic_token.clinic_id),
                        status=_status(clinic_token.used, clinic_token.expires_at, now),
                        created_at=clinic_token.created_at.isoformat(),
                        expires_at=clinic_token.expires_at.isoformat(),
                    )
                )

            return Return.ok(
                ListResetTokensResponse(
                    admin_storage=self.uow.admin_reset_tokens.storage.value,
                    tokens=tokens,
                )
            )
