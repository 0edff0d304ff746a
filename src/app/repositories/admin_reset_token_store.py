from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from src.domain.entities import AdminResetToken, ResetTokenStorage


class IAdminResetTokenStore(ABC):
    """
    Key-value store for admin reset tokens - application layer.

    The same use cases run against a process-local map or a database table.
    """

    storage: ResetTokenStorage

    @abstractmethod
    async def add(self, token: AdminResetToken) -> AdminResetToken:
        """Store a new token"""
        pass

    @abstractmethod
    async def get(self, token_hash: str) -> Optional[AdminResetToken]:
        """Get token record by token hash"""
        pass

    @abstractmethod
    async def consume(self, token_hash: str, now: datetime) -> bool:
        """
        Claim the token iff it is unused and unexpired.

        Returns True for exactly one caller per token.
        """
        pass

    @abstractmethod
    async def delete(self, token_hash: str) -> None:
        """Remove a token"""
        pass

    @abstractmethod
    async def sweep(self, now: datetime) -> int:
        """Remove used or expired tokens, return how many were removed"""
        pass

    @abstractmethod
    async def list_all(self) -> List[AdminResetToken]:
        """Get all stored tokens"""
        pass
