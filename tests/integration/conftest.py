from datetime import timedelta
from typing import List, Tuple

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from src.app.services.email_sender import IEmailSender
from src.app.services.password_hasher import PasswordHasher
from src.depends import get_email_sender, get_password_hasher, get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
import src.domain.entities  # noqa: F401


class RecordingEmailSender(IEmailSender):
    """Keeps reset emails in memory instead of sending them"""

    def __init__(self):
        self.sent: List[Tuple[str, str]] = []
        self.valid_for: List[timedelta] = []

    async def send_password_reset(
        self, to_email: str, reset_link: str, valid_for: timedelta
    ) -> None:
        self.sent.append((to_email, reset_link))
        self.valid_for.append(valid_for)


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def email_sender():
    return RecordingEmailSender()


@pytest_asyncio.fixture
async def client(db_session, email_sender):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: PasswordHasher(rounds=4)
    app.dependency_overrides[get_email_sender] = lambda: email_sender

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
