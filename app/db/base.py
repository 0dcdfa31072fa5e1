# /app/app/db/base.py

from __future__ import annotations

import contextlib
import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    async_sessionmaker,
    AsyncSession,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings

log = logging.getLogger(__name__)


# --- Declarative Base ---
class Base(DeclarativeBase):
    pass


# --- Engine & Session factory ---
if settings.ENVIRONMENT == "test":
    log.info("Using in-memory SQLite database (aiosqlite) for tests.")
    # One shared connection, otherwise every checkout sees an empty database
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
else:
    log.info("Using ASYNC database: %s", settings.DATABASE_URL.split("@")[-1])
    if not settings.DATABASE_URL.startswith(("postgresql+asyncpg://", "sqlite+aiosqlite://")):
        log.warning("DATABASE_URL does not use an async driver.")
        raise ValueError("DATABASE_URL must use the 'asyncpg' or 'aiosqlite' driver.")

    engine_kwargs = {"echo": settings.DB_ECHO, "pool_pre_ping": True}
    if settings.DATABASE_URL.startswith("postgresql+asyncpg://"):
        engine_kwargs["pool_size"] = settings.DB_POOL_SIZE
    engine = create_async_engine(settings.DATABASE_URL, **engine_kwargs)

async_session_factory = async_sessionmaker(
    bind=engine, class_=AsyncSession, expire_on_commit=False
)


async def get_async_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency: creates and yields an async session.

    Reads only, so nothing is committed; on error the session is rolled back
    and the exception re-raised.
    """
    session = async_session_factory()
    log.debug("get_async_db_session: session %s created", id(session))
    try:
        yield session
    except SQLAlchemyError:
        log.exception("get_async_db_session: SQLAlchemyError in session %s, rolling back", id(session))
        await session.rollback()
        raise
    finally:
        log.debug("get_async_db_session: closing session %s", id(session))
        await session.close()


@contextlib.asynccontextmanager
async def async_session_context() -> AsyncGenerator[AsyncSession, None]:
    session: AsyncSession = async_session_factory()
    log.debug("Entering async session context %s", id(session))
    try:
        yield session
        log.debug("Committing session %s from context", id(session))
        await session.commit()
    except Exception:
        log.exception("Rolling back session %s from context due to exception", id(session))
        await session.rollback()
        raise
    finally:
        log.debug("Closing session %s from context", id(session))
        await session.close()


async def create_db_and_tables() -> None:
    """Creates every table registered on ``Base.metadata`` (tests and local dev)."""
    # Models must be imported so their tables are registered
    import app.core.achievements.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.debug("Tables created: %s", ", ".join(Base.metadata.tables))


async def drop_db_and_tables() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # Drop the pooled connection so the next event loop starts clean
    await engine.dispose()
    log.debug("Tables dropped, engine disposed")


__all__ = [
    "Base", "engine", "async_session_factory", "AsyncSession",
    "get_async_db_session", "async_session_context",
    "create_db_and_tables", "drop_db_and_tables",
]
