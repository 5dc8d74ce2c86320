"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness endpoint sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (unique index enforced the same way as on PostgreSQL)
    - One session per request in the client, mirroring production scoping
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from httpx import ASGITransport, AsyncClient

from customer_api.db.base import Base
from customer_api.db.session import create_session_factory
from customer_api.infrastructure.customer_repository import SqlCustomerRepository
from customer_api.infrastructure.database import get_db, DatabaseSessionManager
from customer_api.models.customer import Customer
from customer_api.services.customer_service import CustomerService
import customer_api.infrastructure.database as db_module
from customer_api.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def service(test_db) -> CustomerService:
    return CustomerService(SqlCustomerRepository(test_db))


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_customer(test_session_factory) -> Customer:
    """Insert one customer directly, bypassing the service."""
    async with test_session_factory() as session:
        customer = Customer(
            name="Ada Lovelace", email="ada@example.com", password="s3cret",
        )
        session.add(customer)
        await session.commit()
        await session.refresh(customer)
        return customer
