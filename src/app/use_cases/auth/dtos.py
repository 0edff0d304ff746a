"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the clinic auth domain.
"""

from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Response DTOs
# ============================================================================


class PasswordResetRequested(BaseModel):
    """
    Result of a password reset request.

    token and email are only set when a token was actually issued. The API
    layer decides what reaches the client.
    """

    status: str
    message: str
    token: Optional[str] = None
    email: Optional[str] = None
    valid_hours: int


class ResetTokenDetails(BaseModel):
    """Response for verify reset token use cases"""

    email: str
    expires_at: str


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use cases"""

    status: str
    message: str


RESET_REQUESTED_MESSAGE = "If the email exists, a password reset link has been sent"
INVALID_TOKEN_MESSAGE = "Invalid or expired password reset token"
