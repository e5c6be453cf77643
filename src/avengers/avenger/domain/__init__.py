"""アベンジャーのドメインモデル."""

from .avenger import Avenger

__all__ = ["Avenger"]
