from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool
from app.core.config import settings
from typing import AsyncGenerator

# Async engine for FastAPI
async_engine = create_async_engine(settings.DATABASE_URL_ASYNC, echo=False)
AsyncSessionLocal = async_sessionmaker(bind=async_engine, expire_on_commit=False, class_=AsyncSession)

# Celery tasks run each call on a fresh event loop, so no connection may be pooled across calls
task_engine = create_async_engine(settings.DATABASE_URL_ASYNC, echo=False, poolclass=NullPool)
TaskSessionLocal = async_sessionmaker(bind=task_engine, expire_on_commit=False, class_=AsyncSession)

# Sync engine for Alembic
sync_engine = create_engine(settings.DATABASE_URL_SYNC, echo=False)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
