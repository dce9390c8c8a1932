# =============================================
# jobtracker/config/database.py
# =============================================
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy import MetaData, text
from typing import AsyncGenerator, Optional
from fastapi import Request
import logging

from jobtracker.config.settings import Settings

logger = logging.getLogger(__name__)

# Base Model with metadata
metadata = MetaData()


class Base(DeclarativeBase):
    metadata = metadata


# =============================================
# DOCUMENT STORE
# =============================================

class DocumentStore:
    """Owns the engine and session factory for the applications/contacts tables.

    Constructed explicitly at startup and handed to ``create_app``; nothing in
    the package holds a module-level engine.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False
        )

    @classmethod
    def from_url(cls, url: str, echo: bool = False) -> "DocumentStore":
        """Build a store from a database URL"""
        options = {"echo": echo, "pool_pre_ping": True}
        if url.startswith("sqlite"):
            options["connect_args"] = {"check_same_thread": False}
            if ":memory:" in url or url.rstrip("/").endswith("sqlite+aiosqlite:"):
                # in-memory databases live as long as their single connection
                options["poolclass"] = StaticPool
        else:
            options.update(pool_recycle=3600, pool_size=10, max_overflow=20)
        return cls(create_async_engine(url, **options))

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocumentStore":
        return cls.from_url(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    async def create_tables(self) -> None:
        """Create the collection tables if they do not exist"""
        # registers the models on Base.metadata
        import jobtracker.database.models  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info(f"Tables ready: {sorted(Base.metadata.tables)}")
        except Exception as e:
            logger.error(f"Error creating tables: {e}")
            raise

    async def check_health(self) -> bool:
        """Check if database is accessible"""
        try:
            async with self.session_factory() as session:
                result = await session.execute(text("SELECT 1"))
                return result.scalar() == 1
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False

    async def dispose(self) -> None:
        """Close database connections"""
        await self.engine.dispose()
        logger.info("Database connections closed")


# =============================================
# DEPENDENCIES
# =============================================

def get_store(request: Request) -> DocumentStore:
    """Dependency returning the store attached to the running app"""
    store: Optional[DocumentStore] = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Document store is not configured on the application")
    return store


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency yielding a session bound to the app's store"""
    store = get_store(request)
    async with store.session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
