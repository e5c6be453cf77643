"""アベンジャーのスキーマ."""

from .avenger import AvengerRequest, AvengerResponse

__all__ = ["AvengerRequest", "AvengerResponse"]
