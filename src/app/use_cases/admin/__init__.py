"""Admin use cases: admin account, admin password reset and clinic management."""

from .admin_login_use_case import AdminLoginUseCase
from .ensure_admin_use_case import EnsureAdminUseCase
from .request_admin_password_reset_use_case import RequestAdminPasswordResetUseCase
from .verify_admin_reset_token_use_case import VerifyAdminResetTokenUseCase
from .confirm_admin_password_reset_use_case import ConfirmAdminPasswordResetUseCase
from .list_reset_tokens_use_case import ListResetTokensUseCase, mask_token
from .cleanup_reset_tokens_use_case import CleanupResetTokensUseCase
from .list_clinics_use_case import ListClinicsUseCase
from .delete_clinic_use_case import DeleteClinicUseCase
from .dtos import (
    AdminProfile,
    CleanupResetTokensResponse,
    DeleteClinicResponse,
    EnsureAdminResponse,
    ListClinicsResponse,
    ListResetTokensResponse,
    ResetTokenSummary,
)

__all__ = [
    "AdminLoginUseCase",
    "EnsureAdminUseCase",
    "RequestAdminPasswordResetUseCase",
    "VerifyAdminResetTokenUseCase",
    "ConfirmAdminPasswordResetUseCase",
    "ListResetTokensUseCase",
    "CleanupResetTokensUseCase",
    "ListClinicsUseCase",
    "DeleteClinicUseCase",
    "mask_token",
    "AdminProfile",
    "EnsureAdminResponse",
    "ListClinicsResponse",
    "DeleteClinicResponse",
    "ResetTokenSummary",
    "ListResetTokensResponse",
    "CleanupResetTokensResponse",
]
