from typing import AsyncGenerator
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.models import Base
from app.db.session import get_async_session
from app.db.store import SqlMessageStore
from app.main import app
from app.services.mailbox import Mailbox


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
async def store(session_maker) -> AsyncGenerator[SqlMessageStore, None]:
    async with session_maker() as session:
        yield SqlMessageStore(session)


@pytest.fixture
def mailbox_for(store):
    def make(user_id: int) -> Mailbox:
        return Mailbox(store, user_id)
    return make


@pytest.fixture
async def ac(session_maker) -> AsyncGenerator[AsyncClient, None]:
    async def override_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
