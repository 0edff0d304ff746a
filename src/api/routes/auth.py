from datetime import timedelta
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import INVALID_OR_EXPIRED_TOKEN, raise_for_error, raise_redeem_error
from src.app.services.clock import Clock
from src.app.services.notifications import Notifier, clinic_reset_link
from src.app.services.token_generator import TokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    ClinicLoginUseCase,
    ConfirmPasswordResetResponse,
    ConfirmPasswordResetUseCase,
    RequestPasswordResetUseCase,
    ResetTokenDetails,
    VerifyPasswordResetTokenUseCase,
)
from src.app.use_cases.auth.dtos import INVALID_TOKEN_MESSAGE
from src.app.use_cases.signup import ClinicProfile
from src.depends import get_clock, get_notifier, get_token_generator, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="Clinic email address")
    password: str = Field(..., description="Clinic password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=ClinicProfile)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Clinic Login

    Returns the clinic profile; the client keeps it as its identity.

    Raises:
        - 401 Unauthorized: Invalid credentials
    """
    result = await ClinicLoginUseCase(uow).execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="Account email address")


class ForgotPasswordResponse(BaseModel):
    """
    Response for forgot password endpoints.

    token and reset_link are only included when EXPOSE_RESET_TOKENS is on.
    """

    status: str
    message: str
    token: Optional[str] = None
    reset_link: Optional[str] = None


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=ForgotPasswordResponse,
    response_model_exclude_none=True,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    background_tasks: BackgroundTasks,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
    token_generator: TokenGenerator = Depends(get_token_generator),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Request Clinic Password Reset

    Always returns the same message, whether or not the email belongs to a
    clinic. The reset email is sent after the response.
    """
    use_case = RequestPasswordResetUseCase(
        uow,
        clock=clock,
        token_generator=token_generator,
        ttl=timedelta(hours=ApplicationConfig.CLINIC_RESET_TOKEN_TTL_HOURS),
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(result.error)

    requested = result.value
    response = ForgotPasswordResponse(status=requested.status, message=requested.message)

    if requested.token is not None:
        background_tasks.add_task(
            notifier.send_clinic_password_reset,
            requested.email,
            requested.token,
            requested.valid_hours,
        )
        if ApplicationConfig.EXPOSE_RESET_TOKENS:
            response.token = requested.token
            response.reset_link = clinic_reset_link(notifier.app_url, requested.token)

    return response


@router.get("/reset-password/verify", response_model=ResetTokenDetails)
async def verify_reset_token(
    token: str = Query(..., min_length=1),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Verify Clinic Reset Token

    Raises:
        - 400 Bad Request: Unknown, used or expired token (same response)
    """
    result = await VerifyPasswordResetTokenUseCase(uow, clock=clock).execute(token)

    if result.is_err():
        raise_redeem_error(result.error, INVALID_OR_EXPIRED_TOKEN, INVALID_TOKEN_MESSAGE)

    return result.value


class ResetPasswordRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Password reset token")
    new_password: str = Field(..., description="New password")


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Confirm Clinic Password Reset

    Raises:
        - 400 Bad Request: Empty password, or unknown/used/expired token
    """
    result = await ConfirmPasswordResetUseCase(uow, clock=clock).execute(
        request.token, request.new_password
    )

    if result.is_err():
        raise_redeem_error(result.error, INVALID_OR_EXPIRED_TOKEN, INVALID_TOKEN_MESSAGE)

    return result.value
