"""アベンジャーリポジトリの実装モジュール."""

import logging
from typing import Annotated

from fastapi import Depends

from avengers.avenger.domain import Avenger
from avengers.avenger.exceptions import AvengerNotFoundError
from avengers.database.model.avenger import AvengerEntity
from avengers.database.repository import (
    AvengerEntityRepository,
    get_avenger_entity_repository,
)

logger = logging.getLogger(__name__)


class AvengerRepositoryImpl:
    """ストレージドライバーに委譲するAvengerRepositoryの実装.

    ドメインモデルとストレージのレコード形式を相互に変換する。

    Attributes
    ----------
        repository: ストレージドライバー

    """

    def __init__(self, repository: AvengerEntityRepository) -> None:
        """AvengerRepositoryImplを初期化.

        Args:
        ----
            repository: ストレージドライバー

        """
        self.repository = repository

    async def get_detail(self, avenger_id: int) -> Avenger | None:
        """IDで1件取得.

        Args:
        ----
            avenger_id: アベンジャーID

        Returns:
        -------
            該当するAvenger。存在しない場合はNone

        """
        entity = await self.repository.find_by_id(avenger_id)
        if entity is None:
            return None
        return self._to_avenger(entity)

    async def get_avengers(self) -> list[Avenger]:
        """全件取得."""
        entities = await self.repository.find_all()
        return [self._to_avenger(e) for e in entities]

    async def create(self, avenger: Avenger) -> Avenger:
        """新規登録.

        渡されたIDは無視し、ストレージで新たに採番する。

        Args:
        ----
            avenger: 登録するアベンジャー

        Returns:
        -------
            ID採番済みのAvenger

        """
        entity = self._to_entity(avenger, entity_id=None)
        stored = await self.repository.save(entity)
        logger.info(f"avenger created id={stored.id} nick={stored.nick}")
        return self._to_avenger(stored)

    async def delete(self, avenger_id: int) -> None:
        """IDで削除(存在しない場合は何もしない)."""
        await self.repository.delete_by_id(avenger_id)

    async def update(self, avenger: Avenger) -> Avenger:
        """IDが一致するレコードを全項目置き換える.

        Args:
        ----
            avenger: 更新内容(idは必須)

        Returns:
        -------
            更新後のAvenger

        Raises:
        ------
            ValueError: idが未設定の場合
            AvengerNotFoundError: 該当IDのレコードが存在しない場合

        """
        if avenger.id is None:
            raise ValueError("avenger.id is required for update")

        # 存在しないIDで新規作成されないよう事前に確認する
        if await self.repository.find_by_id(avenger.id) is None:
            raise AvengerNotFoundError(avenger.id)

        entity = self._to_entity(avenger, entity_id=avenger.id)
        stored = await self.repository.save(entity)
        logger.info(f"avenger updated id={stored.id}")
        return self._to_avenger(stored)

    def _to_entity(
        self,
        avenger: Avenger,
        entity_id: int | None,
    ) -> AvengerEntity:
        """AvengerをAvengerEntityへ変換."""
        return AvengerEntity(
            id=entity_id,
            nick=avenger.nick,
            person=avenger.person,
            description=avenger.description,
            history=avenger.history,
        )

    def _to_avenger(self, entity: AvengerEntity) -> Avenger:
        """AvengerEntityをAvengerへ変換."""
        return Avenger(
            id=entity.id,
            nick=entity.nick,
            person=entity.person,
            description=entity.description,
            history=entity.history,
        )


async def get_avenger_repository(
    repository: Annotated[
        AvengerEntityRepository,
        Depends(get_avenger_entity_repository),
    ],
) -> AvengerRepositoryImpl:
    """FastAPI DI用のAvengerRepositoryImplファクトリ.

    Returns
    -------
        AvengerRepositoryImpl

    """
    return AvengerRepositoryImpl(repository)
