"""
Check-in Code Use Cases

Clinic-scoped daily codes that gate the public intake form.
"""

from .generate_code_use_case import GenerateCheckInCodeUseCase
from .verify_code_use_case import VerifyCheckInCodeUseCase
from .deactivate_code_use_case import DeactivateCheckInCodeUseCase
from .delete_code_use_case import DeleteCheckInCodeUseCase
from .list_codes_use_case import GetActiveCheckInCodeUseCase, ListCheckInCodesUseCase
from .cleanup_codes_use_case import CleanupCheckInCodesUseCase
from .dtos import (
    CheckInCodeInfo,
    CheckInCodeStatusResponse,
    CleanupResponse,
    GenerateCheckInCodeResponse,
    ListCheckInCodesResponse,
    VerifyCheckInCodeResponse,
)

__all__ = [
    # Use Cases
    "GenerateCheckInCodeUseCase",
    "VerifyCheckInCodeUseCase",
    "DeactivateCheckInCodeUseCase",
    "DeleteCheckInCodeUseCase",
    "ListCheckInCodesUseCase",
    "GetActiveCheckInCodeUseCase",
    "CleanupCheckInCodesUseCase",
    # DTOs
    "CheckInCodeInfo",
    "CheckInCodeStatusResponse",
    "CleanupResponse",
    "GenerateCheckInCodeResponse",
    "ListCheckInCodesResponse",
    "VerifyCheckInCodeResponse",
]
