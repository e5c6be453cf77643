"""アベンジャーのドメインモデル."""

from pydantic import BaseModel, ConfigDict


class Avenger(BaseModel):
    """アベンジャーを表す不変のドメインモデル.

    ストレージ固有の表現には依存しない。

    Attributes
    ----------
        id: 識別子(未永続化の場合はNone)
        nick: ヒーロー名
        person: 本名
        description: 説明
        history: 経歴

    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    nick: str
    person: str
    description: str | None = None
    history: str | None = None
