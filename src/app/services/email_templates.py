"""
HTML bodies for transactional emails.
"""

from datetime import datetime
from html import escape

_BUTTON_STYLE = (
    "background-color: #000; color: #fff; padding: 12px 24px; "
    "text-decoration: none; border-radius: 4px; display: inline-block;"
)


def _layout(title: str, body: str) -> str:
    return f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
      <h1 style="color: #333;">{title}</h1>
      {body}
      <p>Thank you,</p>
      <p>Vet Clinic Check-in Team</p>
    </div>
    """


def password_reset_email(recipient_email: str, reset_link: str, valid_hours: int) -> str:
    hours = "1 hour" if valid_hours == 1 else f"{valid_hours} hours"
    body = f"""
      <p>Hello,</p>
      <p>We received a request to reset the password for your account ({recipient_email}).</p>
      <p>Click the button below to reset your password:</p>
      <div style="text-align: center; margin: 30px 0;">
        <a href="{reset_link}" style="{_BUTTON_STYLE}">Reset Password</a>
      </div>
      <p>If you didn't request a password reset, you can ignore this email.
      The link will expire in {hours}.</p>
    """
    return _layout("Password Reset Request", body)


def signup_code_email(
    clinic_name: str, code: str, signup_link: str, expires_at: datetime
) -> str:
    body = f"""
      <p>Hello {escape(clinic_name)},</p>
      <p>You have been invited to register your clinic for online check-in.</p>
      <p>Your signup code is:</p>
      <p style="font-size: 24px; font-weight: bold; text-align: center;">{code}</p>
      <div style="text-align: center; margin: 30px 0;">
        <a href="{signup_link}" style="{_BUTTON_STYLE}">Register your clinic</a>
      </div>
      <p>The code can be used once and expires on {expires_at:%Y-%m-%d %H:%M} UTC.</p>
    """
    return _layout("Clinic Registration", body)
