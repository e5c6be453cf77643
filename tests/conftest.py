"""テスト共通のフィクスチャ."""

import os

# アプリのモジュールを読み込む前にインメモリSQLiteを向ける
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession

from avengers.avenger.repository import AvengerRepositoryImpl
from avengers.database.database import create_db_and_tables, get_async_db_session
from avengers.database.repository import SQLModelAvengerEntityRepository
from avengers.main import app


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """テストごとに新しいインメモリDBを用意する."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_db_and_tables(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """テスト用の非同期セッション."""
    async with AsyncSession(engine) as session:
        yield session


@pytest_asyncio.fixture
async def entity_repository(
    session: AsyncSession,
) -> SQLModelAvengerEntityRepository:
    """SQLiteに接続したストレージドライバー."""
    return SQLModelAvengerEntityRepository(session)


@pytest_asyncio.fixture
async def avenger_repository(
    entity_repository: SQLModelAvengerEntityRepository,
) -> AvengerRepositoryImpl:
    """SQLiteに接続したAvengerRepository実装."""
    return AvengerRepositoryImpl(entity_repository)


@pytest_asyncio.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """DBセッションをテスト用エンジンに差し替えたHTTPクライアント."""

    async def override_get_async_db_session() -> AsyncGenerator[AsyncSession]:
        async with AsyncSession(engine) as session:
            yield session

    app.dependency_overrides[get_async_db_session] = (
        override_get_async_db_session
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
