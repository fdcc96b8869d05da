"""테스트 인프라 — 테스트 DB 엔진, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Test database engine, session, and httpx client fixtures.
Defaults to in-memory SQLite (aiosqlite); set TEST_DATABASE_URL to run
against PostgreSQL. The schema is created and dropped around every test.
"""

import os
from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from coop_members.database import Base, get_db
from coop_members.main import app
from coop_members.models import *  # noqa: F401,F403 — register all models with metadata

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 스키마를 새로 만듭니다."""
    kwargs = {"poolclass": StaticPool} if TEST_DATABASE_URL.startswith("sqlite") else {}
    eng = create_async_engine(TEST_DATABASE_URL, echo=False, **kwargs)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성 (커밋하여 롤백 테스트에도 유지)
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def org(db: AsyncSession):
    """테스트 조직을 생성합니다."""
    from coop_members.models.organization import Organization
    o = Organization(name="Cooperativa Teste")
    db.add(o)
    await db.commit()
    return o


@pytest_asyncio.fixture
async def other_org(db: AsyncSession):
    """두 번째 테스트 조직을 생성합니다."""
    from coop_members.models.organization import Organization
    o = Organization(name="Cooperativa Vizinha")
    db.add(o)
    await db.commit()
    return o


@pytest_asyncio.fixture
async def user(db: AsyncSession):
    """테스트 사용자를 생성합니다."""
    from coop_members.models.user import User
    u = User(email="member@coop.test", first_name="Maria", last_name="Silva")
    db.add(u)
    await db.commit()
    return u


def member_payload(org, document: str = "123.456.789-09", **overrides) -> dict:
    """조합원 생성 요청 데이터를 만듭니다."""
    payload = {
        "first_name": "João",
        "last_name": "Pereira",
        "email": "joao@coop.test",
        "phone": "+55 11 99999-0000",
        "document": document,
        "organization": str(org.id),
    }
    payload.update(overrides)
    return payload
