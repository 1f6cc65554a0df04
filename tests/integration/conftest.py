"""Pytest configuration and fixtures for integration tests."""

from typing import AsyncGenerator

import httpx
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from myshop.data.models import Base
from myshop.data.repositories import SqlAlchemyOrderRepository, SqlAlchemyProductRepository
from myshop_web.deps import Repositories, get_repositories
from myshop_web.main import app

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    yield async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with test_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(test_session_factory) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Create HTTP client against the app with the test database."""

    async def override_get_repositories():
        async with test_session_factory() as session:
            yield Repositories(
                orders=SqlAlchemyOrderRepository(session),
                products=SqlAlchemyProductRepository(session),
            )

    app.dependency_overrides[get_repositories] = override_get_repositories

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
