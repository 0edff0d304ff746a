from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import INVALID_OR_EXPIRED_TOKEN, raise_for_error, raise_redeem_error
from src.api.routes.auth import ForgotPasswordRequest, ForgotPasswordResponse, ResetPasswordRequest
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.clock import Clock
from src.app.services.notifications import Notifier, admin_reset_link, signup_link
from src.app.services.token_generator import TokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    AdminLoginUseCase,
    AdminProfile,
    CleanupResetTokensUseCase,
    ConfirmAdminPasswordResetUseCase,
    DeleteClinicResponse,
    DeleteClinicUseCase,
    ListClinicsResponse,
    ListClinicsUseCase,
    ListResetTokensResponse,
    ListResetTokensUseCase,
    RequestAdminPasswordResetUseCase,
    VerifyAdminResetTokenUseCase,
)
from src.app.use_cases.auth import ConfirmPasswordResetResponse, ResetTokenDetails
from src.app.use_cases.auth.dtos import INVALID_TOKEN_MESSAGE
from src.app.use_cases.check_in import CleanupCheckInCodesUseCase
from src.app.use_cases.signup import (
    CleanupSignupCodesUseCase,
    IssueSignupCodeCommand,
    IssueSignupCodeResponse,
    IssueSignupCodeUseCase,
)
from src.depends import get_clock, get_notifier, get_token_generator, get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


# ============================================================================
# Admin account (no API key)
# ============================================================================


class AdminLoginRequest(BaseModel):
    email: EmailStr = Field(..., description="Admin email address")
    password: str = Field(..., description="Admin password")


@router.post("/login", response_model=AdminProfile)
async def admin_login(request: AdminLoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Admin Login

    Raises:
        - 401 Unauthorized: Invalid credentials
    """
    result = await AdminLoginUseCase(uow).execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/forgot-password",
    response_model=ForgotPasswordResponse,
    response_model_exclude_none=True,
)
async def admin_forgot_password(
    request: ForgotPasswordRequest,
    background_tasks: BackgroundTasks,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
    token_generator: TokenGenerator = Depends(get_token_generator),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Request Admin Password Reset

    Same response for every email; only the admin account receives a link.
    """
    use_case = RequestAdminPasswordResetUseCase(
        uow,
        clock=clock,
        token_generator=token_generator,
        ttl=timedelta(hours=ApplicationConfig.ADMIN_RESET_TOKEN_TTL_HOURS),
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(result.error)

    requested = result.value
    response = ForgotPasswordResponse(status=requested.status, message=requested.message)

    if requested.token is not None:
        background_tasks.add_task(
            notifier.send_admin_password_reset,
            requested.email,
            requested.token,
            requested.valid_hours,
        )
        if ApplicationConfig.EXPOSE_RESET_TOKENS:
            response.token = requested.token
            response.reset_link = admin_reset_link(notifier.app_url, requested.token)

    return response


@router.get("/reset-password/verify", response_model=ResetTokenDetails)
async def admin_verify_reset_token(
    token: str = Query(..., min_length=1),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    result = await VerifyAdminResetTokenUseCase(uow, clock=clock).execute(token)

    if result.is_err():
        raise_redeem_error(result.error, INVALID_OR_EXPIRED_TOKEN, INVALID_TOKEN_MESSAGE)

    return result.value


@router.post("/reset-password", response_model=ConfirmPasswordResetResponse)
async def admin_reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Confirm Admin Password Reset

    Raises:
        - 400 Bad Request: Empty password, or unknown/used/expired token
    """
    result = await ConfirmAdminPasswordResetUseCase(uow, clock=clock).execute(
        request.token, request.new_password
    )

    if result.is_err():
        raise_redeem_error(result.error, INVALID_OR_EXPIRED_TOKEN, INVALID_TOKEN_MESSAGE)

    return result.value


# ============================================================================
# Admin area (X-Admin-API-Key required)
# ============================================================================


class IssueSignupCodeRequest(BaseModel):
    clinic_name: str = Field(..., min_length=1, max_length=255, description="Clinic name")
    clinic_email: EmailStr = Field(..., description="Email the clinic will register with")
    created_by: Optional[str] = Field(None, max_length=255, description="Issuing admin")


class IssuedSignupCodeResponse(IssueSignupCodeResponse):
    signup_link: str


@router.post(
    "/signup-codes",
    status_code=status.HTTP_201_CREATED,
    response_model=IssuedSignupCodeResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def issue_signup_code(
    request: IssueSignupCodeRequest,
    background_tasks: BackgroundTasks,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
    token_generator: TokenGenerator = Depends(get_token_generator),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Issue Signup Code

    Pre-authorizes one clinic registration and emails the code to the clinic.

    Raises:
        - 400 Bad Request: Blank clinic name or email
        - 401 Unauthorized: Missing or invalid API key
        - 409 Conflict: A clinic with this email already exists
    """
    command = IssueSignupCodeCommand(
        clinic_name=request.clinic_name,
        clinic_email=request.clinic_email,
        created_by=request.created_by or ApplicationConfig.ADMIN_EMAIL,
    )
    use_case = IssueSignupCodeUseCase(
        uow,
        clock=clock,
        token_generator=token_generator,
        ttl=timedelta(hours=ApplicationConfig.SIGNUP_CODE_TTL_HOURS),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    issued = result.value
    background_tasks.add_task(
        notifier.send_signup_code,
        issued.clinic_email,
        issued.clinic_name,
        issued.code,
        datetime.fromisoformat(issued.expires_at),
    )
    return IssuedSignupCodeResponse(
        **issued.model_dump(), signup_link=signup_link(notifier.app_url, issued.code)
    )


@router.get(
    "/clinics",
    response_model=ListClinicsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def list_clinics(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListClinicsUseCase(uow).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/clinics/{clinic_id}",
    response_model=DeleteClinicResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def delete_clinic(clinic_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Delete Clinic

    Removes the clinic with its check-in codes, reset tokens and signup codes.

    Raises:
        - 404 Not Found: Unknown clinic
    """
    result = await DeleteClinicUseCase(uow).execute(clinic_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/reset-tokens",
    response_model=ListResetTokensResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def list_reset_tokens(
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """List admin and clinic reset tokens with masked token text"""
    result = await ListResetTokensUseCase(uow, clock=clock).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class MaintenanceCleanupResponse(BaseModel):
    check_in_codes_removed: int
    signup_codes_removed: int
    admin_reset_tokens_removed: int
    clinic_reset_tokens_removed: int


@router.post(
    "/maintenance/cleanup",
    response_model=MaintenanceCleanupResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def maintenance_cleanup(
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Remove expired or consumed codes and tokens

    Each cleanup commits on its own.
    """
    codes = await CleanupCheckInCodesUseCase(uow, clock=clock).execute()
    if codes.is_err():
        raise_for_error(codes.error)

    signup_codes = await CleanupSignupCodesUseCase(uow, clock=clock).execute()
    if signup_codes.is_err():
        raise_for_error(signup_codes.error)

    tokens = await CleanupResetTokensUseCase(uow, clock=clock).execute()
    if tokens.is_err():
        raise_for_error(tokens.error)

    return MaintenanceCleanupResponse(
        check_in_codes_removed=codes.value.removed,
        signup_codes_removed=signup_codes.value.removed,
        admin_reset_tokens_removed=tokens.value.admin_removed,
        clinic_reset_tokens_removed=tokens.value.clinic_removed,
    )
