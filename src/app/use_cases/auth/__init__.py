"""
Authentication Use Cases

Clinic login and the clinic password reset flow.
"""

from .clinic_login_use_case import ClinicLoginUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .verify_password_reset_token_use_case import VerifyPasswordResetTokenUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .dtos import (
    ConfirmPasswordResetResponse,
    PasswordResetRequested,
    ResetTokenDetails,
)

__all__ = [
    # Use Cases
    "ClinicLoginUseCase",
    "RequestPasswordResetUseCase",
    "VerifyPasswordResetTokenUseCase",
    "ConfirmPasswordResetUseCase",
    # DTOs - Responses
    "PasswordResetRequested",
    "ResetTokenDetails",
    "ConfirmPasswordResetResponse",
]
