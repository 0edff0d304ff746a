"""
Register Clinic Use Case

Second step of clinic registration: consumes the signup code and creates the
clinic in a single transaction.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import redeem_failure
from src.domain.entities import Clinic
from src.domain.errors import ErrorCode

from .dtos import ClinicProfile, RegisterClinicCommand

INVALID_CODE_MESSAGE = "Invalid or expired code"
CLINIC_EXISTS_MESSAGE = "A clinic with this email already exists"


class RegisterClinicUseCase:
    """
    Use case for registering a clinic with a signup code.

    Business Rules:
    - Password and confirmation must match
    - Code must be unused and unexpired
    - Clinic name and email must match the code (case-insensitive),
      otherwise the code stays unused
    - Clinic email must not be registered yet
    - Code is claimed with a conditional update (used=False -> True) and the
      clinic inserted in the same transaction, so a code creates at most one
      clinic and a failed insert leaves the code unused
    """

    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self, command: RegisterClinicCommand) -> Result[ClinicProfile]:
        if not command.password:
            return Return.err(
                Error(ErrorCode.validation_error.value, "Password is required")
            )
        if command.password != command.confirm_password:
            return Return.err(
                Error(ErrorCode.validation_error.value, "Passwords do not match")
            )

        code = command.code.strip().upper()
        clinic_name = command.clinic_name.strip()
        email = command.email.strip()

        async with self.uow:
            now = self.clock.now()

            signup_code = await self.uow.signup_codes.get_by_code(code)
            if signup_code is None:
                return Return.err(Error(ErrorCode.not_found.value, INVALID_CODE_MESSAGE))

            failure = redeem_failure(signup_code.expires_at, signup_code.used, now)
            if failure is not None:
                return Return.err(Error(failure.value, INVALID_CODE_MESSAGE))

            if (
                signup_code.clinic_name.lower() != clinic_name.lower()
                or signup_code.clinic_email.lower() != email.lower()
            ):
                return Return.err(
                    Error(
                        ErrorCode.validation_error.value,
                        "Clinic name or email does not match the code",
                    )
                )

            existing_clinic = await self.uow.clinics.get_by_email(email)
            if existing_clinic is not None:
                return Return.err(Error(ErrorCode.conflict.value, CLINIC_EXISTS_MESSAGE))

            # Lost a race with another registration using the same code
            claimed = await self.uow.signup_codes.consume(code, now)
            if not claimed:
                return Return.err(
                    Error(ErrorCode.already_consumed.value, INVALID_CODE_MESSAGE)
                )

            clinic = Clinic(
                name=signup_code.clinic_name,
                email=signup_code.clinic_email,
                password=command.password,
                contact_person=command.contact_person,
                address=command.address,
                city=command.city,
                state=command.state,
                zip=command.zip,
                phone=command.phone,
                created_at=now,
            )
            try:
                clinic = await self.uow.clinics.create(clinic)
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(Error(ErrorCode.conflict.value, CLINIC_EXISTS_MESSAGE))

            await self.uow.commit()

            return Return.ok(ClinicProfile.from_entity(clinic))
