"""データベース接続とセッション管理を提供するモジュール."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from avengers.database import model  # noqa: F401
from avengers.settings.settings import get_settings

settings = get_settings()
sqlalchemy_url = settings.sqlalchemy_url

async_engine = create_async_engine(
    url=sqlalchemy_url,
    echo=settings.sql_log,
)


async def get_async_db_session() -> AsyncGenerator[AsyncSession]:
    """非同期データベースセッションを生成する.

    FastAPIの依存性注入で使用されるジェネレーター関数。
    セッションのライフサイクルを管理し、リクエスト終了時に自動的にクローズする。

    Yields
    ------
        AsyncSession: 非同期データベースセッション

    """
    async with AsyncSession(async_engine) as session:
        yield session


async def create_db_and_tables(
    engine: AsyncEngine,
    *,
    drop_existing: bool = False,
) -> None:
    """登録済みモデルのテーブルを作成する.

    Args:
    ----
        engine: 対象の非同期エンジン
        drop_existing: Trueの場合、作成前に既存テーブルを削除する

    """
    async with engine.begin() as conn:
        if drop_existing:
            await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
