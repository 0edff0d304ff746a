"""
Issue Signup Code Use Case

Admin pre-authorizes the registration of one named clinic.
"""

from datetime import timedelta
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.token_generator import SecureTokenGenerator, TokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SignupCode
from src.domain.errors import ErrorCode

from .dtos import IssueSignupCodeCommand, IssueSignupCodeResponse

DEFAULT_TTL = timedelta(hours=24)
MAX_GENERATION_ATTEMPTS = 5


class IssueSignupCodeUseCase:
    """
    Use case for issuing a clinic signup code.

    Business Rules:
    - Clinic name and email are required
    - Rejected with CONFLICT if a clinic already uses the email,
      checked before anything is written
    - Code is 6 random uppercase alphanumerics, unique among signup codes
    - Code expires 24 hours after issue
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

    async def execute(self, command: IssueSignupCodeCommand) -> Result[IssueSignupCodeResponse]:
        clinic_name = command.clinic_name.strip()
        clinic_email = command.clinic_email.strip()

        if not clinic_name or not clinic_email:
            return Return.err(
                Error(ErrorCode.validation_error.value, "Clinic name and email are required")
            )

        async with self.uow:
            existing_clinic = await self.uow.clinics.get_by_email(clinic_email)
            if existing_clinic is not None:
                return Return.err(
                    Error(ErrorCode.conflict.value, "A clinic with this email already exists")
                )

            code = None
            for _ in range(MAX_GENERATION_ATTEMPTS):
                candidate = self.token_generator.signup_code()
                if await self.uow.signup_codes.get_by_code(candidate) is None:
                    code = candidate
                    break

            if code is None:
                return Return.err(
                    Error(
                        ErrorCode.dependency_failure.value,
                        "Could not generate a unique signup code",
                    )
                )

            now = self.clock.now()
            signup_code = SignupCode(
                code=code,
                clinic_name=clinic_name,
                clinic_email=clinic_email,
                created_by=command.created_by,
                used=False,
                created_at=now,
                expires_at=now + self.ttl,
            )
            signup_code = await self.uow.signup_codes.create(signup_code)

            await self.uow.commit()

            return Return.ok(
                IssueSignupCodeResponse(
                    code=signup_code.code,
                    clinic_name=signup_code.clinic_name,
                    clinic_email=signup_code.clinic_email,
                    created_by=signup_code.created_by,
                    expires_at=signup_code.expires_at.isoformat(),
                )
            )
