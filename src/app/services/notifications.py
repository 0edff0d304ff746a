"""
Fire-and-forget notification emails.

Called from FastAPI background tasks after the business operation has been
committed. Delivery failures are logged and never reach the caller.
"""

import logging
from datetime import datetime
from urllib.parse import urlencode

from .email_sender import EmailDeliveryError, EmailSender
from .email_templates import password_reset_email, signup_code_email

logger = logging.getLogger(__name__)


def signup_link(app_url: str, code: str) -> str:
    return f"{app_url.rstrip('/')}/signup?{urlencode({'code': code})}"


def clinic_reset_link(app_url: str, token: str) -> str:
    return f"{app_url.rstrip('/')}/reset-password?{urlencode({'token': token})}"


def admin_reset_link(app_url: str, token: str) -> str:
    return f"{app_url.rstrip('/')}/admin/reset-password?{urlencode({'token': token})}"


class Notifier:
    def __init__(self, sender: EmailSender, app_url: str):
        self.sender = sender
        self.app_url = app_url

    async def send_signup_code(
        self, clinic_email: str, clinic_name: str, code: str, expires_at: datetime
    ) -> None:
        html = signup_code_email(
            clinic_name, code, signup_link(self.app_url, code), expires_at
        )
        await self._deliver(clinic_email, "Your clinic signup code", html)

    async def send_clinic_password_reset(
        self, email: str, token: str, valid_hours: int
    ) -> None:
        html = password_reset_email(
            email, clinic_reset_link(self.app_url, token), valid_hours
        )
        await self._deliver(email, "Reset Your Password", html)

    async def send_admin_password_reset(
        self, email: str, token: str, valid_hours: int
    ) -> None:
        html = password_reset_email(
            email, admin_reset_link(self.app_url, token), valid_hours
        )
        await self._deliver(email, "Reset Your Admin Password", html)

    async def _deliver(self, to: str, subject: str, html: str) -> None:
        try:
            receipt = await self.sender.send(to, subject, html)
        except EmailDeliveryError as e:
            logger.error(f"Email '{subject}' to {to} failed: {e}")
            return
        logger.info(f"Email '{subject}' sent to {to} (id={receipt.id})")
