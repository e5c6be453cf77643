"""リポジトリモジュール."""

from .avenger_entity_repository import (
    AvengerEntityRepository,
    SQLModelAvengerEntityRepository,
    get_avenger_entity_repository,
)

__all__ = [
    "AvengerEntityRepository",
    "SQLModelAvengerEntityRepository",
    "get_avenger_entity_repository",
]
