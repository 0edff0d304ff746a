from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.domain.entities import SignupCode


class ISignupCodeRepository(ABC):
    """SignupCode repository interface - application layer"""

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[SignupCode]:
        """Get signup code by code text"""
        pass

    @abstractmethod
    async def create(self, signup_code: SignupCode) -> SignupCode:
        """Create a new signup code"""
        pass

    @abstractmethod
    async def consume(self, code: str, now: datetime) -> bool:
        """
        Mark the code used iff it is unused and unexpired.

        Single conditional UPDATE; returns False when no row qualified.
        """
        pass

    @abstractmethod
    async def delete_by_clinic_email(self, clinic_email: str) -> int:
        """Delete every signup code issued for an email"""
        pass

    @abstractmethod
    async def delete_stale(self, now: datetime) -> int:
        """Delete used or expired signup codes"""
        pass
