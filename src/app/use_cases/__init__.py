"""
Use Cases

Organized into domain folders:
- check_in/: Clinic check-in codes
- signup/: Signup codes and clinic registration
- auth/: Clinic login and clinic password reset
- admin/: Admin account, admin password reset and clinic management

Import from subdirectories for better organization.
"""

from .check_in import (
    GenerateCheckInCodeUseCase,
    VerifyCheckInCodeUseCase,
    DeactivateCheckInCodeUseCase,
    DeleteCheckInCodeUseCase,
    ListCheckInCodesUseCase,
    GetActiveCheckInCodeUseCase,
    CleanupCheckInCodesUseCase,
)
from .signup import (
    IssueSignupCodeUseCase,
    VerifySignupCodeUseCase,
    RegisterClinicUseCase,
    CleanupSignupCodesUseCase,
)
from .auth import (
    ClinicLoginUseCase,
    RequestPasswordResetUseCase,
    VerifyPasswordResetTokenUseCase,
    ConfirmPasswordResetUseCase,
)
from .admin import (
    AdminLoginUseCase,
    EnsureAdminUseCase,
    RequestAdminPasswordResetUseCase,
    VerifyAdminResetTokenUseCase,
    ConfirmAdminPasswordResetUseCase,
    ListResetTokensUseCase,
    CleanupResetTokensUseCase,
    ListClinicsUseCase,
    DeleteClinicUseCase,
)

__all__ = [
    # Check-in
    "GenerateCheckInCodeUseCase",
    "VerifyCheckInCodeUseCase",
    "DeactivateCheckInCodeUseCase",
    "DeleteCheckInCodeUseCase",
    "ListCheckInCodesUseCase",
    "GetActiveCheckInCodeUseCase",
    "CleanupCheckInCodesUseCase",
    # Signup
    "IssueSignupCodeUseCase",
    "VerifySignupCodeUseCase",
    "RegisterClinicUseCase",
    "CleanupSignupCodesUseCase",
    # Auth
    "ClinicLoginUseCase",
    "RequestPasswordResetUseCase",
    "VerifyPasswordResetTokenUseCase",
    "ConfirmPasswordResetUseCase",
    # Admin
    "AdminLoginUseCase",
    "EnsureAdminUseCase",
    "RequestAdminPasswordResetUseCase",
    "VerifyAdminResetTokenUseCase",
    "ConfirmAdminPasswordResetUseCase",
    "ListResetTokensUseCase",
    "CleanupResetTokensUseCase",
    "ListClinicsUseCase",
    "DeleteClinicUseCase",
]
