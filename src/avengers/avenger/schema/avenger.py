"""アベンジャーのリクエスト/レスポンススキーマ."""

from pydantic import BaseModel, ConfigDict, field_validator

from avengers.avenger.domain import Avenger


class AvengerRequest(BaseModel):
    """アベンジャー登録・更新リクエストスキーマ."""

    nick: str
    person: str
    description: str | None = None
    history: str | None = None

    @field_validator("nick", "person")
    @classmethod
    def not_blank(cls, value: str) -> str:
        """空文字・空白のみの値を拒否する."""
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def to_avenger(self) -> Avenger:
        """ID未採番のAvengerへ変換(登録用)."""
        return Avenger(
            nick=self.nick,
            person=self.person,
            description=self.description,
            history=self.history,
        )

    def to_identified_avenger(self, avenger_id: int) -> Avenger:
        """指定IDを持つAvengerへ変換(更新用).

        Args:
        ----
            avenger_id: 更新対象のID

        Returns:
        -------
            Avenger

        """
        return Avenger(
            id=avenger_id,
            nick=self.nick,
            person=self.person,
            description=self.description,
            history=self.history,
        )


class AvengerResponse(BaseModel):
    """アベンジャーレスポンススキーマ."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    nick: str
    person: str
    description: str | None
    history: str | None
