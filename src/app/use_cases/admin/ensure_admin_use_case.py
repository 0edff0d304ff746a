"""
Ensure Admin Use Case

Seeds the configured admin account at application start-up.
"""

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Admin
from src.domain.errors import ErrorCode
from .dtos import EnsureAdminResponse


class EnsureAdminUseCase:
    """
    Create the admin row for the configured email if it does not exist yet.

    An existing admin is left untouched, so a password changed through the
    reset flow survives restarts.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[EnsureAdminResponse]:
        if not email or not password:
            return Return.err(
                Error(ErrorCode.validation_error.value, "Admin email and password are required")
            )

        async with self.uow:
            admin = await self.uow.admins.get_by_email(email)
            if admin is not None:
                return Return.ok(
                    EnsureAdminResponse(id=str(admin.id), email=admin.email, created=False)
                )

            admin = await self.uow.admins.create(
                Admin(email=email.strip().lower(), password=password)
            )
            await self.uow.commit()

            return Return.ok(
                EnsureAdminResponse(id=str(admin.id), email=admin.email, created=True)
            )
