"""アベンジャー関連の例外."""


class AvengerNotFoundError(Exception):
    """指定IDのアベンジャーが存在しない."""

    def __init__(self, avenger_id: int) -> None:
        self.avenger_id = avenger_id
        super().__init__(f"avenger id={avenger_id} not found")
