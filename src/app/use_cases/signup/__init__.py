"""
Signup Code Use Cases

Admin-issued one-time codes that gate clinic registration.
"""

from .issue_signup_code_use_case import IssueSignupCodeUseCase
from .verify_signup_code_use_case import VerifySignupCodeUseCase
from .register_clinic_use_case import RegisterClinicUseCase
from .cleanup_signup_codes_use_case import CleanupSignupCodesUseCase
from .dtos import (
    ClinicProfile,
    IssueSignupCodeCommand,
    IssueSignupCodeResponse,
    RegisterClinicCommand,
    SignupCodeInfo,
)

__all__ = [
    # Use Cases
    "IssueSignupCodeUseCase",
    "VerifySignupCodeUseCase",
    "RegisterClinicUseCase",
    "CleanupSignupCodesUseCase",
    # DTOs - Commands
    "IssueSignupCodeCommand",
    "RegisterClinicCommand",
    # DTOs - Responses
    "IssueSignupCodeResponse",
    "SignupCodeInfo",
    "ClinicProfile",
]
