"""Shared fixtures: an in-memory SQLite database per test."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import sample_models  # noqa: F401 — registers test mappers with Base.metadata
from datafiltering.infrastructure.database import Base, Settings


@pytest.fixture
def settings():
    return Settings(
        models_module="sample_models",
        pagination_with_pages=True,
        pagination_per_page=15,
    )


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()
