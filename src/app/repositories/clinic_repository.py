from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Clinic


class IClinicRepository(ABC):
    """Clinic repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, clinic_id: UUID) -> Optional[Clinic]:
        """Get clinic by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Clinic]:
        """Get clinic by email address (case-insensitive)"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Clinic]:
        """Get all clinics ordered by email"""
        pass

    @abstractmethod
    async def create(self, clinic: Clinic) -> Clinic:
        """Create a new clinic"""
        pass

    @abstractmethod
    async def update(self, clinic: Clinic) -> Clinic:
        """Update existing clinic"""
        pass

    @abstractmethod
    async def delete(self, clinic: Clinic) -> None:
        """Delete a clinic"""
        pass
