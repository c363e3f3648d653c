"""
Pytest configuration and shared fixtures.
"""

import os

# Settings are read at import time; point them at a throwaway database first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./fundgrant-test.db")

from typing import Any, Dict, List, Sequence, Type

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from fundgrant.db.session import build_engine, create_tables, get_db
from fundgrant.main import app
from fundgrant.seed_data import load_fixture
from fundgrant.services.collection_service import CollectionService


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests, no external deps")
    config.addinivalue_line("markers", "db: uses a throwaway sqlite database")
    config.addinivalue_line("markers", "server: requires running HTTP server")


def pytest_collection_modifyitems(config, items):
    run_server = os.environ.get("RUN_SERVER_TESTS") == "1"

    skip_server = pytest.mark.skip(reason="server tests skipped by default; set RUN_SERVER_TESTS=1 to enable")

    for item in items:
        if "server" in item.keywords and not run_server:
            item.add_marker(skip_server)


@pytest.fixture
def analyses() -> List[Dict[str, Any]]:
    """The 15 demo analyses, in fixture order."""
    return load_fixture("analyses")


@pytest_asyncio.fixture
async def session_maker(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'fundgrant.db'}")
    await create_tables(engine)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_maker):
    """HTTP client bound to the app, with get_db pointed at the test database."""

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()


@pytest.fixture
def seed(session_maker):
    """Load records into an empty collection through its service."""

    async def _seed(service_class: Type[CollectionService], records: Sequence[Dict[str, Any]]) -> None:
        async with session_maker() as session:
            await service_class(session).seed(records)

    return _seed
