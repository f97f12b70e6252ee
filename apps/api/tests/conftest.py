"""
Shared test configuration
"""
import os
import tempfile

# Settings are read at import time
os.environ.setdefault(
    "DATABASE_URL_ASYNC",
    f"sqlite+aiosqlite:///{os.path.join(tempfile.gettempdir(), 'accounts_test.db')}"
)
os.environ.setdefault("NODE_ENV", "development")
os.environ.setdefault("BCRYPT_SALT_ROUNDS", "4")

import pytest

from accounts.core.database import drop_db, init_db
from accounts.repositories import UserRepository


@pytest.fixture(autouse=True)
async def database():
    """Fresh users table for every test"""
    await drop_db()
    await init_db()
    yield
    await drop_db()


@pytest.fixture
def repository():
    """Create a repository instance for testing."""
    return UserRepository()


@pytest.fixture
async def alice(repository):
    """Persisted user used by most tests"""
    return await repository.create_user("alice", "a@x.com", "secret1")
