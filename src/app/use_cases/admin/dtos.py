"""
Admin Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.app.use_cases.signup.dtos import ClinicProfile
from src.domain.entities import Admin


class AdminProfile(BaseModel):
    """Admin identity returned after login"""

    id: str
    email: str

    @classmethod
    def from_entity(cls, admin: Admin) -> "AdminProfile":
        return cls(id=str(admin.id), email=admin.email)


class EnsureAdminResponse(AdminProfile):
    """Response for the start-up admin bootstrap"""

    created: bool


class ListClinicsResponse(BaseModel):
    """Response for list clinics use case"""

    clinics: List[ClinicProfile]


class DeleteClinicResponse(BaseModel):
    """Response for delete clinic use case"""

    id: str
    status: str
    check_in_codes_removed: int
    reset_tokens_removed: int
    signup_codes_removed: int


class ResetTokenSummary(BaseModel):
    """
    Reset token as shown on the admin debug screen.

    Only a masked prefix and suffix of the stored SHA-256 hash is shown.
    """

    kind: str
    token_hash: str
    email: Optional[str] = None
    clinic_id: Optional[str] = None
    status: str
    created_at: str
    expires_at: str


class ListResetTokensResponse(BaseModel):
    """Response for list reset tokens use case"""

    admin_storage: str
    tokens: List[ResetTokenSummary]


class CleanupResetTokensResponse(BaseModel):
    """Response for cleanup reset tokens use case"""

    admin_removed: int
    clinic_removed: int
