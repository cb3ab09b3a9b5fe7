"""Service test fixtures — async DB, repository, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - schemaless_db is a reachable store without the recipes table (infra failures)

Design Decisions:
    - SQLite in-memory: fast, no external dependency; its UNIQUE violations exercise
      the same classifier path as PostgreSQL/MySQL duplicate-key errors
    - Seed recipes reuse fixed uuids so assertions can name them
"""

from uuid import UUID

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from recipes_data_provider.db.base import Base
from recipes_data_provider.infrastructure.database import get_db, DatabaseSessionManager
from recipes_data_provider.models.recipe import Recipe
from recipes_data_provider.services.recipe_repository import SqlRecipeRepository
import recipes_data_provider.infrastructure.database as db_module
from recipes_data_provider.main import app

SEED_RECIPES = [
    (UUID("ab24fde6-495b-45b6-be3c-1343939b646a"), "Recipe 1"),
    (UUID("fe0efe1e-eab7-4ca4-a059-e51de04b0eed"), "Recipe 2"),
    (UUID("a4f5ceb4-3d74-444f-a05f-57e8cfd42061"), "Recipe 3"),
]


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
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_recipes(test_db):
    """Insert the three seed recipes and return them."""
    recipes = [Recipe(uuid=uid, title=title) for uid, title in SEED_RECIPES]
    test_db.add_all(recipes)
    await test_db.commit()
    return recipes


@pytest.fixture
def repository(test_db):
    return SqlRecipeRepository(test_db)


@pytest.fixture
async def schemaless_db():
    """Session on a reachable database that has no recipes table."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

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
