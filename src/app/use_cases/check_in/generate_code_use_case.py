"""
Generate Check-in Code Use Case

Issues a new daily check-in code for a clinic and retires the previous ones.
"""

from datetime import timedelta
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.token_generator import SecureTokenGenerator, TokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import CheckInCode
from src.domain.errors import ErrorCode

from .dtos import CheckInCodeInfo, GenerateCheckInCodeResponse

DEFAULT_TTL = timedelta(hours=8)


class GenerateCheckInCodeUseCase:
    """
    Use case for generating a clinic check-in code.

    Business Rules:
    - Code is "PET" + 3 random uppercase alphanumerics
    - Code expires 8 hours after generation
    - All currently active codes of the clinic are deactivated, not deleted
    - Deactivation and insert are committed in one transaction
    - Collisions with other clinics' codes are not checked
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

    async def execute(self, clinic_id: UUID) -> Result[GenerateCheckInCodeResponse]:
        """
        Execute generate check-in code use case.

        Args:
            clinic_id: Clinic the code is issued for

        Returns:
            Result with the new code, or Error(NOT_FOUND) for an unknown clinic
        """
        async with self.uow:
            clinic = await self.uow.clinics.get_by_id(clinic_id)
            if clinic is None:
                return Return.err(Error(ErrorCode.not_found.value, "Clinic not found"))

            now = self.clock.now()

            deactivated = await self.uow.check_in_codes.deactivate_all_by_clinic_id(
                clinic_id
            )

            check_in_code = CheckInCode(
                code=self.token_generator.check_in_code(),
                clinic_id=clinic_id,
                active=True,
                created_at=now,
                expires_at=now + self.ttl,
            )
            check_in_code = await self.uow.check_in_codes.create(check_in_code)

            await self.uow.commit()

            return Return.ok(
                GenerateCheckInCodeResponse(
                    code=CheckInCodeInfo.from_entity(check_in_code, now),
                    deactivated_count=deactivated,
                )
            )
