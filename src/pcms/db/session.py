from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import MetaData
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from pcms.config import Settings, settings

# Naming conventions for database constraints, so generated constraint names are stable.
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base for all SQLAlchemy models.

    Persisted records inherit from ``pcms.models.Entity``, which adds the
    lifecycle columns on top of this class.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def engine_options(config: Settings) -> dict[str, Any]:
    """Engine keyword arguments for the configured database.

    Pool tuning and the statement timeout only apply to the asyncpg driver;
    SQLite (used by the test-suite) gets a plain engine.
    """
    options: dict[str, Any] = {"echo": config.db_echo}
    if make_url(config.database_url).get_backend_name() == "sqlite":
        return options
    options.update(
        pool_size=config.db_pool_size,
        max_overflow=config.db_max_overflow,
        pool_timeout=config.db_pool_timeout,
        pool_recycle=config.db_pool_recycle,
        pool_pre_ping=config.db_pool_pre_ping,
        connect_args={"command_timeout": config.db_statement_timeout},
    )
    return options


engine = create_async_engine(settings.database_url, **engine_options(settings))

# expire_on_commit=False keeps objects usable after commit without re-querying
# (attribute refresh would otherwise trigger implicit I/O outside the event loop).
async_session = async_sessionmaker(engine, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that provides a database session per request.

    Commits on success, rolls back on exception. Repositories and services
    never call commit() or rollback() themselves.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def shutdown() -> None:
    """Close all pooled database connections."""
    await engine.dispose()
