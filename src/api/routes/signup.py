from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from src.api.error import INVALID_OR_EXPIRED_CODE, raise_redeem_error
from src.app.services.clock import Clock
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.signup import (
    ClinicProfile,
    RegisterClinicCommand,
    RegisterClinicUseCase,
    SignupCodeInfo,
    VerifySignupCodeUseCase,
)
from src.depends import get_clock, get_unit_of_work

router = APIRouter(prefix="/signup")

INVALID_CODE_MESSAGE = "Invalid or expired signup code"


class VerifySignupCodeRequest(BaseModel):
    code: str = Field(..., min_length=1, max_length=32, description="Signup code")


@router.post("/verify", response_model=SignupCodeInfo)
async def verify_signup_code(
    request: VerifySignupCodeRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Verify Signup Code

    Returns the clinic name and email the code was issued for, used to
    prefill the registration form. Does not consume the code.

    Raises:
        - 400 Bad Request: Unknown, used or expired code (same response)
        - 409 Conflict: A clinic with the code's email already exists
    """
    result = await VerifySignupCodeUseCase(uow, clock=clock).execute(request.code)

    if result.is_err():
        raise_redeem_error(result.error, INVALID_OR_EXPIRED_CODE, INVALID_CODE_MESSAGE)

    return result.value


class RegisterClinicRequest(BaseModel):
    """
    Clinic registration HTTP request payload

    Validates incoming HTTP request before converting to RegisterClinicCommand.
    """

    code: str = Field(..., min_length=1, max_length=32, description="Signup code")
    clinic_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., description="Clinic login email")
    password: str = Field(..., min_length=1, description="Clinic password")
    confirm_password: str = Field(..., description="Must equal password")
    contact_person: Optional[str] = Field(None, max_length=255)
    address: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    zip: Optional[str] = Field(None, max_length=20)
    phone: Optional[str] = Field(None, max_length=50)


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=ClinicProfile)
async def register_clinic(
    request: RegisterClinicRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Register Clinic

    Redeems a signup code and creates the clinic account in one transaction.

    Raises:
        - 400 Bad Request: Invalid/used/expired code, password mismatch,
          name or email not matching the code
        - 409 Conflict: Clinic email already registered
        - 500 Internal Server Error: Server error
    """
    command = RegisterClinicCommand(**request.model_dump())

    result = await RegisterClinicUseCase(uow, clock=clock).execute(command)

    if result.is_err():
        raise_redeem_error(result.error, INVALID_OR_EXPIRED_CODE, INVALID_CODE_MESSAGE)

    return result.value
