"""
Clinic Login Use Case

Checks clinic credentials and returns the clinic profile. The client keeps
the profile itself; no server-side session is created.
"""

import secrets

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.signup.dtos import ClinicProfile
from src.domain.errors import ErrorCode


class ClinicLoginUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[ClinicProfile]:
        async with self.uow:
            clinic = await self.uow.clinics.get_by_email(email)

            if clinic is None or not secrets.compare_digest(
                clinic.password.encode(), password.encode()
            ):
                return Return.err(
                    Error(ErrorCode.invalid_credentials.value, "Invalid email or password")
                )

            return Return.ok(ClinicProfile.from_entity(clinic))
