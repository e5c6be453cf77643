"""FastAPIアプリケーションのメインエントリーポイント."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

import uvicorn
from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from avengers.avenger.exceptions import AvengerNotFoundError
from avengers.avenger.router import router as avenger_router
from avengers.common.log_prefix import LogPrefix
from avengers.database.database import async_engine, create_db_and_tables
from avengers.settings.settings import Settings, get_settings

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """アプリケーションのライフサイクル管理.

    設定で有効な場合のみ、起動時にテーブルを作成する。
    """
    if settings.create_tables_on_startup:
        logger.info(f"{LogPrefix.DB_INIT} creating tables on startup")
        await create_db_and_tables(async_engine)
    yield
    await async_engine.dispose()


app = FastAPI(title="Avengers API", lifespan=lifespan)
app.include_router(avenger_router)


@app.exception_handler(AvengerNotFoundError)
async def avenger_not_found_handler(
    _: Request,
    exc: AvengerNotFoundError,
) -> JSONResponse:
    """AvengerNotFoundErrorを404に変換する."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(
    request: Request,
    exc: SQLAlchemyError,
) -> JSONResponse:
    """ストレージ層の例外をログ出力し、500に変換する."""
    logger.error(
        f"{LogPrefix.AVENGER_API} {request.method} {request.url.path} "
        f"failed: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "storage failure"},
    )


@app.get("/")
async def root(
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict[str, str]:
    """ルートエンドポイント.

    ヘルスチェック用にサービス名と実行環境を返却する。

    Args:
        settings: アプリケーション設定

    Returns:
        dict: サービス名と実行環境

    """
    return {"service": "avengers-api", "environment": settings.environment}


def run() -> None:
    """uvicornでAPIサーバーを起動する."""
    uvicorn.run(
        "avengers.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
