"""アベンジャー関連のプロトコル."""

from .avenger_repository import AvengerRepository

__all__ = ["AvengerRepository"]
