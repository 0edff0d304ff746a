"""
Delete Clinic Use Case

Removes a clinic account together with everything issued for it.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ErrorCode
from .dtos import DeleteClinicResponse


class DeleteClinicUseCase:
    """
    Delete a clinic and its dependent rows.

    Business Logic:
    1. Validate clinic exists
    2. Delete its check-in codes
    3. Delete its password reset tokens
    4. Delete signup codes issued for its email
    5. Delete the clinic
    6. Commit once, so a failure at any step leaves everything in place
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, clinic_id: UUID) -> Result[DeleteClinicResponse]:
        """
        Execute delete clinic use case.

        Args:
            clinic_id: Clinic to delete

        Returns:
            Result with removal counts, or Error(NOT_FOUND)
        """
        async with self.uow:
            clinic = await self.uow.clinics.get_by_id(clinic_id)
            if clinic is None:
                return Return.err(Error(ErrorCode.not_found.value, "Clinic not found"))

            codes_removed = await self.uow.check_in_codes.delete_by_clinic_id(clinic_id)
            tokens_removed = await self.uow.password_reset_tokens.delete_by_clinic_id(
                clinic_id
            )
            signup_removed = await self.uow.signup_codes.delete_by_clinic_email(clinic.email)

            await self.uow.clinics.delete(clinic)

            await self.uow.commit()

            return Return.ok(
                DeleteClinicResponse(
                    id=str(clinic_id),
                    status="deleted",
                    check_in_codes_removed=codes_removed,
                    reset_tokens_removed=tokens_removed,
                    signup_codes_removed=signup_removed,
                )
            )
