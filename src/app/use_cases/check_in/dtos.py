"""
Check-in Code Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel

from src.domain.entities import CheckInCode


class CheckInCodeInfo(BaseModel):
    """Check-in code as shown on the clinic dashboard"""

    id: str
    code: str
    clinic_id: str
    active: bool
    status: str
    created_at: str
    expires_at: str

    @classmethod
    def from_entity(cls, code: CheckInCode, now: datetime) -> "CheckInCodeInfo":
        if not code.active:
            status = "inactive"
        elif not now < code.expires_at:
            status = "expired"
        else:
            status = "active"
        return cls(
            id=str(code.id),
            code=code.code,
            clinic_id=str(code.clinic_id),
            active=code.active,
            status=status,
            created_at=code.created_at.isoformat(),
            expires_at=code.expires_at.isoformat(),
        )


class GenerateCheckInCodeResponse(BaseModel):
    """Response for generate check-in code use case"""

    code: CheckInCodeInfo
    deactivated_count: int


class VerifyCheckInCodeResponse(BaseModel):
    """Response for verify check-in code use case"""

    clinic_id: str
    code: str
    expires_at: str


class ListCheckInCodesResponse(BaseModel):
    """Response for list check-in codes use case"""

    codes: List[CheckInCodeInfo]


class CheckInCodeStatusResponse(BaseModel):
    """Response for deactivate and delete use cases"""

    id: str
    status: str


class CleanupResponse(BaseModel):
    """Response for cleanup use cases"""

    removed: int
