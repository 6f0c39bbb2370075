"""Pytest configuration for async testing.

This configuration ensures:
1. Settings resolve to the testing environment before src is imported
2. Async tests are marked automatically
3. Integration tests get a fresh SQLite database per test
"""

import inspect
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./members_test.db")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.infrastructure.persistence.database import Database  # noqa: E402


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a fresh SQLite database with the members table created.

    Each test gets its own file so tests never see each other's rows.
    """
    database = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'members.db'}")
    await database.create_all()
    yield database
    await database.drop_all()
    await database.close()


@pytest_asyncio.fixture
async def test_session(test_database):
    """Provide a session on the per-test database."""
    async with test_database.get_session() as session:
        yield session


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)
