"""
Database session and engine configuration.

This file sets up the async database connection using SQLAlchemy
(asyncpg in production, aiosqlite for local development and tests).
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from fundgrant.core.config import settings
from fundgrant.db.base import Base


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine, adding the options sqlite needs."""
    engine_kwargs: Dict[str, Any] = {"echo": echo, "future": True}
    if database_url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    return create_async_engine(database_url, **engine_kwargs)


# Create the async database engine
engine = build_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,  # When DEBUG=True, prints SQL queries to console
)

# Create a session factory
# Sessions are used to interact with the database (read, write, update, delete)
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Keeps data accessible after commit
)

# Alias for dependencies
AsyncSessionLocal = async_session_maker


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create all tables (safe to call multiple times)."""
    # Register the models on Base.metadata before create_all
    import fundgrant.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Get a database session.
    
    This is used by FastAPI to provide a database connection to your API endpoints.
    The session is automatically closed when the request is done.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

