"""アベンジャーのデータモデルを定義するモジュール."""

from sqlalchemy import BigInteger, Column, Integer, Text
from sqlmodel import Field, SQLModel


class AvengerEntity(SQLModel, table=True):
    """アベンジャーを表すデータベースモデル.

    Attributes
    ----------
        id: 自動採番ID(主キー)
        nick: ヒーロー名 (例: Iron Man)
        person: 本名 (例: Tony Stark)
        description: 説明(オプショナル)
        history: 経歴(オプショナル)

    """

    __tablename__ = "avengers"

    id: int | None = Field(
        default=None,
        sa_column=Column(
            BigInteger().with_variant(Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
    )
    nick: str = Field(max_length=200)
    person: str = Field(max_length=200)
    description: str | None = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )
    history: str | None = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )
