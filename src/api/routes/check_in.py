from datetime import timedelta
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import INVALID_OR_EXPIRED_CODE, raise_for_error, raise_redeem_error
from src.app.services.clock import Clock
from src.app.services.token_generator import TokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.check_in import (
    CheckInCodeInfo,
    CheckInCodeStatusResponse,
    DeactivateCheckInCodeUseCase,
    DeleteCheckInCodeUseCase,
    GenerateCheckInCodeResponse,
    GenerateCheckInCodeUseCase,
    GetActiveCheckInCodeUseCase,
    ListCheckInCodesResponse,
    ListCheckInCodesUseCase,
    VerifyCheckInCodeResponse,
    VerifyCheckInCodeUseCase,
)
from src.depends import get_clock, get_token_generator, get_unit_of_work

router = APIRouter()


@router.post(
    "/clinics/{clinic_id}/codes",
    status_code=status.HTTP_201_CREATED,
    response_model=GenerateCheckInCodeResponse,
)
async def generate_code(
    clinic_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
    token_generator: TokenGenerator = Depends(get_token_generator),
):
    """
    Generate Check-in Code

    Issues a new code for the clinic and deactivates its previous codes.

    Raises:
        - 404 Not Found: Unknown clinic
        - 500 Internal Server Error: Server error
    """
    use_case = GenerateCheckInCodeUseCase(
        uow,
        clock=clock,
        token_generator=token_generator,
        ttl=timedelta(hours=ApplicationConfig.CHECKIN_CODE_TTL_HOURS),
    )
    result = await use_case.execute(clinic_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/clinics/{clinic_id}/codes", response_model=ListCheckInCodesResponse)
async def list_codes(
    clinic_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """List a clinic's check-in codes, newest first"""
    result = await ListCheckInCodesUseCase(uow, clock=clock).execute(clinic_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/clinics/{clinic_id}/codes/active", response_model=CheckInCodeInfo)
async def get_active_code(
    clinic_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Get the clinic's currently valid check-in code

    Raises:
        - 404 Not Found: No active, unexpired code
    """
    result = await GetActiveCheckInCodeUseCase(uow, clock=clock).execute(clinic_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/codes/{code_id}/deactivate", response_model=CheckInCodeStatusResponse)
async def deactivate_code(code_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await DeactivateCheckInCodeUseCase(uow).execute(code_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/codes/{code_id}", response_model=CheckInCodeStatusResponse)
async def delete_code(code_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await DeleteCheckInCodeUseCase(uow).execute(code_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class VerifyCheckInCodeRequest(BaseModel):
    code: str = Field(..., min_length=1, max_length=32, description="Check-in code")


@router.post("/check-in/verify", response_model=VerifyCheckInCodeResponse)
async def verify_code(
    request: VerifyCheckInCodeRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Verify Check-in Code

    Resolves a code typed by a pet owner to its clinic. Does not consume it.

    Raises:
        - 400 Bad Request: Unknown, inactive or expired code (same response)
    """
    result = await VerifyCheckInCodeUseCase(uow, clock=clock).execute(request.code)

    if result.is_err():
        raise_redeem_error(result.error, INVALID_OR_EXPIRED_CODE, "Invalid or expired code")

    return result.value
