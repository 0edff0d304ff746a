"""
Email sender implementations.

ResendEmailSender posts to the Resend HTTP API. Transport errors and 5xx
responses are retried a bounded number of times; 4xx responses are not.
"""

import asyncio
import logging
import uuid
from typing import Optional

import httpx

from src.app.services.email_sender import EmailDeliveryError, EmailReceipt, EmailSender

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


class ResendEmailSender(EmailSender):
    def __init__(
        self,
        api_key: str,
        sender: str,
        api_url: str = RESEND_API_URL,
        max_retries: int = 3,
        retry_delay: float = 2.0,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.sender = sender
        self.api_url = api_url
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay
        self.timeout = timeout
        self._transport = transport

    async def send(self, to: str, subject: str, html: str) -> EmailReceipt:
        payload = {"from": self.sender, "to": [to], "subject": subject, "html": html}
        headers = {"Authorization": f"Bearer {self.api_key}"}
        last_error = "no attempt made"

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            for attempt in range(1, self.max_retries + 1):
                try:
                    response = await client.post(self.api_url, json=payload, headers=headers)
                except httpx.TransportError as e:
                    last_error = f"transport error: {e}"
                    logger.warning(
                        f"Email send attempt {attempt}/{self.max_retries} to {to} failed: {last_error}"
                    )
                else:
                    if response.is_success:
                        try:
                            return EmailReceipt(id=str(response.json().get("id", "")))
                        except (ValueError, AttributeError) as e:
                            # Accepted by the provider but the receipt is unreadable
                            raise EmailDeliveryError(
                                f"unreadable response body: {response.text!r}"
                            ) from e
                    last_error = f"HTTP {response.status_code}: {response.text}"
                    if response.status_code < 500:
                        # Rejected by the provider, retrying will not help
                        break
                    logger.warning(
                        f"Email send attempt {attempt}/{self.max_retries} to {to} failed: {last_error}"
                    )

                if attempt < self.max_retries:
                    await asyncio.sleep(self.retry_delay * attempt)

        raise EmailDeliveryError(last_error)


class LoggingEmailSender(EmailSender):
    """Development sender: writes the message to the log instead of sending it"""

    async def send(self, to: str, subject: str, html: str) -> EmailReceipt:
        receipt = EmailReceipt(id=f"local-{uuid.uuid4()}")
        logger.info(f"[email not sent] to={to} subject={subject!r} id={receipt.id}")
        logger.debug(html)
        return receipt
