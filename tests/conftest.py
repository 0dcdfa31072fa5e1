import os
import sys
from typing import AsyncGenerator

# Ensure Python path includes project root for `import app`
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import app.conftest  # noqa: F401,E402

import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from app.db.base import async_session_context, create_db_and_tables, drop_db_and_tables  # noqa: E402


@pytest_asyncio.fixture
async def db() -> AsyncGenerator[None, None]:
    await create_db_and_tables()
    yield
    await drop_db_and_tables()


@pytest_asyncio.fixture
async def db_session(db) -> AsyncGenerator[AsyncSession, None]:
    async with async_session_context() as session:
        yield session
