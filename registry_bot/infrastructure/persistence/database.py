"""
Database configuration for registry bot.

Provides:
- Database initialization (init_database, init_db, close_db)
- Session factory access (get_session_maker)
"""
import logging
from pathlib import Path
from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

from .models import Base

logger = logging.getLogger("registry-bot.infrastructure.persistence.database")

# ==================== Database Configuration ====================

engine: Optional[AsyncEngine] = None
async_session_maker: Optional[async_sessionmaker[AsyncSession]] = None


def to_async_url(database_url: str) -> str:
    """
    Convert a sync SQLAlchemy URL to its async driver variant.

    Args:
        database_url: SQLAlchemy database URL

    Returns:
        URL with async driver (aiosqlite, asyncpg)
    """
    if database_url.startswith("sqlite:///"):
        return database_url.replace("sqlite:///", "sqlite+aiosqlite:///")
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://")
    return database_url


def init_database(database_url: str) -> async_sessionmaker[AsyncSession]:
    """
    Initialize database engine and session maker.

    Args:
        database_url: SQLAlchemy database URL

    Returns:
        Session factory bound to the new engine
    """
    global engine, async_session_maker

    # Ensure data directory exists for file-based SQLite
    if database_url.startswith("sqlite:///") and ":memory:" not in database_url:
        db_path = database_url.replace("sqlite:///", "")
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    async_db_url = to_async_url(database_url)
    engine = create_async_engine(
        async_db_url,
        echo=False,
        pool_pre_ping=True,
    )

    if "sqlite" in async_db_url:
        @event.listens_for(engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            """Set SQLite pragmas for durable single-writer access"""
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA synchronous=FULL")
            cursor.execute("PRAGMA busy_timeout=30000")  # 30 seconds
            cursor.close()

        logger.info("SQLite WAL mode and pragmas configured")

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    logger.info(f"Database initialized with driver: {engine.url.drivername}")
    return async_session_maker


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Return the session factory created by init_database()."""
    if async_session_maker is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return async_session_maker


async def init_db() -> None:
    """Initialize database (create tables)"""
    if engine is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema initialized")


async def close_db() -> None:
    """Close database connections"""
    global engine, async_session_maker

    if engine is not None:
        await engine.dispose()
        logger.info("Database connections closed")
    engine = None
    async_session_maker = None
