"""アベンジャーリポジトリのプロトコル定義."""

from typing import Protocol

from avengers.avenger.domain import Avenger


class AvengerRepository(Protocol):
    """アベンジャーの永続化操作のインターフェース.

    ストレージ技術から独立しており、バックエンドごとに実装を用意する。
    """

    async def get_detail(self, avenger_id: int) -> Avenger | None:
        """IDで1件取得(存在しない場合はNone)."""
        ...

    async def get_avengers(self) -> list[Avenger]:
        """全件取得."""
        ...

    async def create(self, avenger: Avenger) -> Avenger:
        """新規登録し、ID採番済みのアベンジャーを返す."""
        ...

    async def delete(self, avenger_id: int) -> None:
        """IDで削除(存在しない場合は何もしない)."""
        ...

    async def update(self, avenger: Avenger) -> Avenger:
        """IDが一致するレコードを全項目置き換える."""
        ...
