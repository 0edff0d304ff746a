"""
Admin Login Use Case
"""

import secrets

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ErrorCode
from .dtos import AdminProfile


class AdminLoginUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[AdminProfile]:
        async with self.uow:
            admin = await self.uow.admins.get_by_email(email)

            if admin is None or not secrets.compare_digest(
                admin.password.encode(), password.encode()
            ):
                return Return.err(
                    Error(ErrorCode.invalid_credentials.value, "Invalid email or password")
                )

            return Return.ok(AdminProfile.from_entity(admin))
