"""avengersテーブルのリポジトリモジュール.

ドメイン層から独立した、汎用的なストレージドライバー
(ID検索・全件取得・保存・ID削除)を提供する。
"""

import logging
from collections.abc import Sequence
from typing import Annotated, Protocol

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from avengers.common.log_prefix import LogPrefix
from avengers.database.database import get_async_db_session
from avengers.database.model.avenger import AvengerEntity

logger = logging.getLogger(__name__)


class AvengerEntityRepository(Protocol):
    """AvengerEntityを永続化するストレージドライバーのインターフェース."""

    async def find_by_id(self, entity_id: int) -> AvengerEntity | None:
        """IDでレコードを取得."""
        ...

    async def find_all(self) -> Sequence[AvengerEntity]:
        """全レコードを取得."""
        ...

    async def save(self, entity: AvengerEntity) -> AvengerEntity:
        """レコードを保存(IDなしなら登録、IDありなら更新)."""
        ...

    async def delete_by_id(self, entity_id: int) -> None:
        """IDでレコードを削除."""
        ...


class SQLModelAvengerEntityRepository:
    """avengersテーブルへのデータアクセスを提供するリポジトリ.

    Attributes
    ----------
        session: 非同期DBセッション

    """

    def __init__(self, session: AsyncSession) -> None:
        """SQLModelAvengerEntityRepositoryを初期化.

        Args:
        ----
            session: 非同期DBセッション

        """
        self.session = session

    async def find_by_id(self, entity_id: int) -> AvengerEntity | None:
        """IDでレコードを取得.

        Args:
        ----
            entity_id: 主キー

        Returns:
        -------
            該当するAvengerEntity。存在しない場合はNone

        """
        return await self.session.get(AvengerEntity, entity_id)

    async def find_all(self) -> Sequence[AvengerEntity]:
        """全レコードを取得.

        Returns
        -------
            AvengerEntityのリスト

        """
        result = await self.session.exec(select(AvengerEntity))
        return result.all()

    async def save(self, entity: AvengerEntity) -> AvengerEntity:
        """レコードを保存.

        IDが未設定なら新規登録、設定済みなら同じIDのレコードへマージする。

        Args:
        ----
            entity: 保存するAvengerEntity

        Returns:
        -------
            保存後(ID採番済み)のAvengerEntity

        Raises:
        ------
            SQLAlchemyError: DB書き込みエラー時

        """
        try:
            if entity.id is None:
                self.session.add(entity)
                stored = entity
            else:
                stored = await self.session.merge(entity)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                f"{LogPrefix.STORAGE_ERROR} save failed id=%s error=%s",
                entity.id,
                e,
            )
            raise

        await self.session.refresh(stored)
        return stored

    async def delete_by_id(self, entity_id: int) -> None:
        """IDでレコードを削除(存在しない場合は何もしない).

        Args:
        ----
            entity_id: 主キー

        Raises:
        ------
            SQLAlchemyError: DB削除エラー時

        """
        entity = await self.find_by_id(entity_id)
        if entity is None:
            logger.debug(f"avenger id={entity_id} not found, nothing to delete")
            return

        try:
            await self.session.delete(entity)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                f"{LogPrefix.STORAGE_ERROR} delete failed id=%s error=%s",
                entity_id,
                e,
            )
            raise


async def get_avenger_entity_repository(
    session: Annotated[AsyncSession, Depends(get_async_db_session)],
) -> SQLModelAvengerEntityRepository:
    """FastAPI DI用のSQLModelAvengerEntityRepositoryファクトリ.

    Returns
    -------
        SQLModelAvengerEntityRepository

    """
    return SQLModelAvengerEntityRepository(session)
