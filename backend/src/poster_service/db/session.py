from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import MetaData
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from poster_service.config import settings

# Naming conventions for database constraints.
# Without these, Alembic can't autogenerate consistent constraint names across migrations.
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",  # Index
    "uq": "uq_%(table_name)s_%(column_0_name)s",  # Unique constraint
    "ck": "ck_%(table_name)s_%(constraint_name)s",  # Check constraint
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",  # Foreign key
    "pk": "pk_%(table_name)s",  # Primary key
}


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models.

    All record kinds inherit from this class. SQLAlchemy uses Base.metadata to track
    all registered models and their table schemas.

    The naming_convention gives the unique constraint on expert image names a
    predictable name, which the conflict translation and the migrations rely on.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def engine_options(database_url: str) -> dict[str, Any]:
    """Pool and driver options for the configured backend.

    Pool sizing and the statement timeout only apply to the asyncpg driver;
    SQLite (used by local runs and tests) gets SQLAlchemy's defaults.
    """
    options: dict[str, Any] = {"echo": settings.db_echo}
    if make_url(database_url).get_backend_name() != "postgresql":
        return options
    options.update(
        pool_size=settings.db_pool_size,  # Persistent connections
        max_overflow=settings.db_max_overflow,  # Extra connections under load
        pool_timeout=settings.db_pool_timeout,  # Wait time for available connection
        pool_recycle=settings.db_pool_recycle,  # Max connection age
        pool_pre_ping=settings.db_pool_pre_ping,  # Test connection before checkout
        # asyncpg driver options: passed directly to asyncpg.connect()
        connect_args={"command_timeout": settings.db_statement_timeout},
    )
    return options


# Async engine with connection pooling.
engine = create_async_engine(settings.database_url, **engine_options(settings.database_url))

# expire_on_commit=False keeps records usable after commit without re-querying,
# so routers can serialize them after the session has closed.
async_session = async_sessionmaker(engine, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that provides a database session per request.

    Commits on success, rolls back on exception. This is the single place where
    transaction boundaries are managed: services and repositories never call
    commit() or rollback() directly. A failed flush (e.g. a unique-constraint
    violation) leaves the session unusable until this rollback runs.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def shutdown() -> None:
    """Graceful shutdown: close all pooled database connections."""
    await engine.dispose()
