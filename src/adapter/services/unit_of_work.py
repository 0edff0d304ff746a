from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.admin_repository import AdminRepository
from src.adapter.repositories.admin_reset_token_store import SqlAdminResetTokenStore
from src.adapter.repositories.check_in_code_repository import CheckInCodeRepository
from src.adapter.repositories.clinic_repository import ClinicRepository
from src.adapter.repositories.password_reset_token_repository import PasswordResetTokenRepository
from src.adapter.repositories.signup_code_repository import SignupCodeRepository
from src.app.repositories.admin_reset_token_store import IAdminResetTokenStore
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    SQLAlchemy implementation of UnitOfWork pattern.

    ``admin_token_store`` replaces the session-backed admin reset token store,
    e.g. with the process-wide in-memory store.
    """

    def __init__(
        self,
        session: AsyncSession,
        admin_token_store: Optional[IAdminResetTokenStore] = None,
    ):
        self.session = session
        self._admin_token_store = admin_token_store

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.clinics = ClinicRepository(self.session)
        self.check_in_codes = CheckInCodeRepository(self.session)
        self.signup_codes = SignupCodeRepository(self.session)
        self.password_reset_tokens = PasswordResetTokenRepository(self.session)
        self.admins = AdminRepository(self.session)
        self.admin_reset_tokens = (
            self._admin_token_store or SqlAdminResetTokenStore(self.session)
        )
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
