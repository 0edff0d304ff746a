from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """Clinic PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        """Get password reset token by token hash"""
        pass

    @abstractmethod
    async def consume(self, token_hash: str, now: datetime) -> bool:
        """Mark the token used iff it is unused and unexpired"""
        pass

    @abstractmethod
    async def list_all(self) -> List[PasswordResetToken]:
        """Get all tokens, newest first"""
        pass

    @abstractmethod
    async def delete_by_clinic_id(self, clinic_id: UUID) -> int:
        """Delete every token of a clinic"""
        pass

    @abstractmethod
    async def delete_stale(self, now: datetime) -> int:
        """Delete used or expired tokens"""
        pass
