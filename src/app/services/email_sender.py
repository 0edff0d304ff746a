from abc import ABC, abstractmethod

from pydantic import BaseModel


class EmailReceipt(BaseModel):
    """Identifier assigned by the email provider"""

    id: str


class EmailDeliveryError(Exception):
    """Raised when the provider rejects the message or cannot be reached"""


class EmailSender(ABC):
    """Outbound transactional email - application layer"""

    @abstractmethod
    async def send(self, to: str, subject: str, html: str) -> EmailReceipt:
        pass
