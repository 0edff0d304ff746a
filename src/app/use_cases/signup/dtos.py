"""
Signup Code Use Case DTOs (Data Transfer Objects)

Command/Response pattern:
- IssueSignupCodeCommand / RegisterClinicCommand: input to use cases
- Responses: structured output, decoupled from HTTP
"""

from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Clinic


class IssueSignupCodeCommand(BaseModel):
    """Admin intent to pre-authorize one clinic registration"""

    clinic_name: str
    clinic_email: str
    created_by: str


class RegisterClinicCommand(BaseModel):
    """
    Clinic registration redeeming a signup code.

    clinic_name and email must match the code (case-insensitive).
    """

    code: str
    clinic_name: str
    email: str
    password: str
    confirm_password: str
    contact_person: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None


class SignupCodeInfo(BaseModel):
    """Signup code details, used both after issue and for form prefill"""

    code: str
    clinic_name: str
    clinic_email: str
    expires_at: str


class IssueSignupCodeResponse(SignupCodeInfo):
    """Response for issue signup code use case"""

    created_by: str


class ClinicProfile(BaseModel):
    """Clinic account data returned to the client (never the password)"""

    id: str
    name: str
    email: str
    contact_person: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    created_at: str

    @classmethod
    def from_entity(cls, clinic: Clinic) -> "ClinicProfile":
        return cls(
            id=str(clinic.id),
            name=clinic.name,
            email=clinic.email,
            contact_person=clinic.contact_person,
            address=clinic.address,
            city=clinic.city,
            state=clinic.state,
            zip=clinic.zip,
            phone=clinic.phone,
            created_at=clinic.created_at.isoformat(),
        )
