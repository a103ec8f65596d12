from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from items_svc.core.config import get_settings

settings = get_settings()


def _engine_kwargs(uri: str) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"echo": False, "poolclass": NullPool}
    if uri.startswith("postgresql+asyncpg"):
        kwargs["connect_args"] = {"timeout": settings.DATABASE_CONNECT_TIMEOUT}
    return kwargs


# NullPool: every session opens its own connection and closes it on release
engine = create_async_engine(settings.sqlalchemy_database_uri, **_engine_kwargs(settings.sqlalchemy_database_uri))

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    class_=AsyncSession,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session bound to a freshly opened connection."""
    async with AsyncSessionLocal() as session:
        yield session


async def ping_database() -> None:
    """Open a connection, run a liveness probe, close it. Raises on failure."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
