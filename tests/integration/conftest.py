import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from staffdesk.adapter.services.notifiers import OutboxNotifier
from staffdesk.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from staffdesk.api.app import create_app
from staffdesk.app.services.password_hasher import PasswordHasher
from staffdesk.depends import get_unit_of_work
from tests.fixtures.json_loader import TestDataLoader


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
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
async def app(db_session):
    app = create_app(ApplicationConfig)

    # Cheap hashing and no real mail
    app.state.password_hasher = PasswordHasher(rounds=4)
    app.state.notifier = OutboxNotifier()

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    return app


@pytest_asyncio.fixture
def outbox(app):
    return app.state.notifier


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def auth_headers(client, test_data):
    """Registers and logs in the default user, returning a bearer header"""
    user = test_data.get_copy("user")
    response = await client.post("/register", json=user)
    assert response.status_code == 201

    response = await client.post(
        "/login", json={"email": user["email"], "password": user["password"]}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
