import logging
from typing import AsyncIterator
from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncEngine, AsyncSession
from .config import Settings
from .base import Base

log = logging.getLogger("store")

class Database:
    """Process-scoped store handle: one engine, many short-lived sessions."""

    def __init__(self, dsn: str, database: str | None = None, manage: str = "create_all"):
        url = make_url(dsn)
        if database:
            url = url.set(database=database)
        self.url = url
        self.manage = manage
        self.engine: AsyncEngine | None = None
        self.session_factory: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.STORE_DSN, settings.DATABASE_NAME, settings.DB_MANAGE)

    async def connect(self):
        """Open the engine and verify the store answers (called on FastAPI startup)."""
        self.engine = create_async_engine(self.url, pool_pre_ping=True)
        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False, class_=AsyncSession)
        # the patients model has to be registered on Base.metadata before create_all
        from er_triage.modules.patients import models  # noqa: F401
        try:
            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
                ## dev "create_all" mode; with "none" the collection is provisioned outside the service
                if self.manage == "create_all":
                    await conn.run_sync(Base.metadata.create_all)
        except Exception:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None
            raise
        log.info(f"Connected to store {self.url.render_as_string(hide_password=True)}")

    async def close(self):
        """Dispose the engine (called on FastAPI shutdown)."""
        if self.engine:
            log.info("Closing store connection...")
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None

    def session(self) -> AsyncSession:
        if self.session_factory is None:
            raise RuntimeError("Database is not connected")
        return self.session_factory()

def get_database(request: Request) -> Database:
    return request.app.state.store

async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    async with get_database(request).session() as session:
        yield session
