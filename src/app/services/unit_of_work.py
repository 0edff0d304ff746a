from abc import ABC, abstractmethod

from src.app.repositories.admin_repository import IAdminRepository
from src.app.repositories.admin_reset_token_store import IAdminResetTokenStore
from src.app.repositories.check_in_code_repository import ICheckInCodeRepository
from src.app.repositories.clinic_repository import IClinicRepository
from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.app.repositories.signup_code_repository import ISignupCodeRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    clinics: IClinicRepository
    check_in_codes: ICheckInCodeRepository
    signup_codes: ISignupCodeRepository
    password_reset_tokens: IPasswordResetTokenRepository
    admins: IAdminRepository
    admin_reset_tokens: IAdminResetTokenStore

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
