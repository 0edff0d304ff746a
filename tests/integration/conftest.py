import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.notifications import Notifier
from src.depends import get_clock, get_notifier, get_token_generator, get_unit_of_work
from src.domain.entities import Admin, Clinic
from tests.fixtures.accounts import ADMIN_EMAIL, ADMIN_PASSWORD
from tests.fixtures.fakes import FixedClock, RecordingEmailSender


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def admin_token_store():
    """None keeps admin reset tokens in the database"""
    return None


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def token_generator():
    """None keeps the secure generator"""
    return None


@pytest.fixture
def email_sender():
    return RecordingEmailSender()


@pytest.fixture
def expose_tokens(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "EXPOSE_RESET_TOKENS", True)


@pytest.fixture
def admin_headers():
    return {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


@pytest_asyncio.fixture
async def client(session_factory, admin_token_store, clock, token_generator, email_sender):
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session, admin_token_store=admin_token_store)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_notifier] = lambda: Notifier(
        email_sender, "https://app.example.com"
    )
    if token_generator is not None:
        app.dependency_overrides[get_token_generator] = lambda: token_generator

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin(db_session):
    admin = Admin(email=ADMIN_EMAIL, password=ADMIN_PASSWORD)
    db_session.add(admin)
    await db_session.commit()
    return admin


@pytest_asyncio.fixture
async def clinic(db_session):
    clinic = Clinic(name="Happy Paws", email="paws@example.com", password="clinic-pass")
    db_session.add(clinic)
    await db_session.commit()
    return clinic
