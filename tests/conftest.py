import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import build_engine, build_session_maker, get_db
from app.main import app
from app.models import *  # noqa: F401, F403
from app.services.exercise_catalog import seed_predefined_exercises


@pytest_asyncio.fixture
async def engine():
    test_engine = build_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_maker(engine):
    return build_session_maker(engine)


@pytest_asyncio.fixture
async def db(session_maker):
    async with session_maker() as session:
        await seed_predefined_exercises(session)
        await session.commit()
        yield session


@pytest_asyncio.fixture
async def client(session_maker, db):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

