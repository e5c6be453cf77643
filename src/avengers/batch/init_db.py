"""テーブル作成バッチジョブ.

設定されたデータベースに avengers テーブルを作成する。
"""

import asyncio
import logging
from typing import Annotated

import typer

from avengers.common.log_prefix import LogPrefix
from avengers.database.database import async_engine, create_db_and_tables
from avengers.settings.settings import get_settings

app = typer.Typer()

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@app.command()
def main(
    drop: Annotated[
        bool,
        typer.Option(help="作成前に既存テーブルを削除する"),
    ] = False,
) -> None:
    """テーブルを作成する.

    Args:
    ----
        drop: 既存テーブルを削除してから作成する

    """
    asyncio.run(init_db(drop=drop))


async def init_db(drop: bool) -> None:
    """テーブルを非同期で作成.

    Args:
    ----
        drop: 既存テーブルを削除してから作成する

    """
    logger.info(f"{LogPrefix.DB_INIT} Starting with drop={drop}")

    await create_db_and_tables(async_engine, drop_existing=drop)
    await async_engine.dispose()

    logger.info(f"{LogPrefix.DB_INIT} Completed")


if __name__ == "__main__":
    app()
