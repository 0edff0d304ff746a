from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import CheckInCode


class ICheckInCodeRepository(ABC):
    """CheckInCode repository interface - application layer"""

    @abstractmethod
    async def get_valid_by_code(self, code: str, now: datetime) -> Optional[CheckInCode]:
        """Get the newest active, unexpired row carrying this code"""
        pass

    @abstractmethod
    async def get_latest_by_code(self, code: str) -> Optional[CheckInCode]:
        """Get the newest row carrying this code regardless of state"""
        pass

    @abstractmethod
    async def get_active_by_clinic_id(
        self, clinic_id: UUID, now: datetime
    ) -> Optional[CheckInCode]:
        """Get the clinic's newest active, unexpired code"""
        pass

    @abstractmethod
    async def list_by_clinic_id(self, clinic_id: UUID) -> List[CheckInCode]:
        """Get all codes of a clinic, newest first"""
        pass

    @abstractmethod
    async def create(self, code: CheckInCode) -> CheckInCode:
        """Create a new check-in code"""
        pass

    @abstractmethod
    async def deactivate_all_by_clinic_id(self, clinic_id: UUID) -> int:
        """Set active=False on every active code of a clinic"""
        pass

    @abstractmethod
    async def deactivate(self, code_id: UUID) -> bool:
        """Set active=False on one code"""
        pass

    @abstractmethod
    async def delete(self, code_id: UUID) -> bool:
        """Hard delete one code"""
        pass

    @abstractmethod
    async def delete_by_clinic_id(self, clinic_id: UUID) -> int:
        """Delete every code of a clinic"""
        pass

    @abstractmethod
    async def delete_stale(self, now: datetime) -> int:
        """Delete inactive or expired codes"""
        pass
