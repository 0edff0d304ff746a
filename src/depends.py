from typing import Optional

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.repositories.admin_reset_token_store import InMemoryAdminResetTokenStore
from src.adapter.services.email_sender import LoggingEmailSender, ResendEmailSender
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.repositories.admin_reset_token_store import IAdminResetTokenStore
from src.app.services.clock import Clock, SystemClock
from src.app.services.email_sender import EmailSender
from src.app.services.notifications import Notifier
from src.app.services.token_generator import SecureTokenGenerator, TokenGenerator
from src.domain.entities import ResetTokenStorage

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


def build_admin_token_store(config) -> Optional[IAdminResetTokenStore]:
    """
    Process-wide admin reset token store, or None to use the database table.

    Raises:
        ValueError: unknown ADMIN_RESET_TOKEN_STORE value
    """
    storage = ResetTokenStorage(config.ADMIN_RESET_TOKEN_STORE)
    if storage == ResetTokenStorage.memory:
        return InMemoryAdminResetTokenStore()
    return None


def build_email_sender(config) -> EmailSender:
    if config.RESEND_API_KEY:
        return ResendEmailSender(
            api_key=config.RESEND_API_KEY,
            sender=config.EMAIL_FROM,
            api_url=config.RESEND_API_URL,
            max_retries=config.EMAIL_MAX_RETRIES,
            retry_delay=config.EMAIL_RETRY_DELAY_SECONDS,
        )
    return LoggingEmailSender()


admin_token_store = build_admin_token_store(ApplicationConfig)
email_sender = build_email_sender(ApplicationConfig)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session, admin_token_store=admin_token_store)


def get_clock() -> Clock:
    return SystemClock()


def get_token_generator() -> TokenGenerator:
    return SecureTokenGenerator()


def get_notifier() -> Notifier:
    return Notifier(email_sender, ApplicationConfig.APP_URL)
