"""
Pytest configuration and fixtures.
"""

import itertools
import sys
from pathlib import Path
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.infra import config
from app.infra.db import Base
from app.infra.repository import KeyValueRepository, TodoRepository

from .fakes import FakeKeyValueStore


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point config and data directories at a temp dir for every test"""
    monkeypatch.setenv("TODOLIST_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("TODOLIST_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setattr(config, "_settings", None)
    yield
    monkeypatch.setattr(config, "_settings", None)


@pytest_asyncio.fixture
async def db_engine():
    """Create an in-memory SQLite database for testing"""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """Create a new session for a test"""
    async_session = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as session:
        yield session


@pytest.fixture
def kv_repo(db_session):
    return KeyValueRepository(session=db_session)


@pytest.fixture
def todo_repo(kv_repo):
    """TodoRepository backed by the in-memory database"""
    return TodoRepository(store=kv_repo)


@pytest.fixture
def fake_store():
    return FakeKeyValueStore()


@pytest.fixture
def sequential_ids():
    """Deterministic id factory: '1', '2', '3', ..."""
    counter = itertools.count(1)
    return lambda: str(next(counter))
