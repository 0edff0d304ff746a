"""
Domain Entities

Each entity in its own file.
"""

from .enums import ResetTokenStorage

from .clinic import Clinic
from .check_in_code import CheckInCode
from .signup_code import SignupCode
from .password_reset_token import PasswordResetToken
from .admin import Admin
from .admin_reset_token import AdminResetToken

__all__ = [
    # Enums
    "ResetTokenStorage",
    # Entities
    "Clinic",
    "CheckInCode",
    "SignupCode",
    "PasswordResetToken",
    "Admin",
    "AdminResetToken",
]
