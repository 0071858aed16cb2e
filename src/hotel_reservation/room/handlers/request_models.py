from pydantic import BaseModel, Field, field_validator


class RoomRequest(BaseModel):
    """客室1件分のリクエストモデル

    値の妥当性はドメイン側で検証し、不正な客室だけをスキップする。
    """

    room_number: str = Field(..., description="部屋番号（正の整数）", examples=["101"])
    price_amount: str = Field(..., description="料金（0 は無料）", examples=["150.00"])
    room_type: str = Field(..., description="部屋種別（SINGLE / DOUBLE）")

    @field_validator("room_number", "price_amount", mode="before")
    @classmethod
    def convert_to_str(cls, v: object) -> str:
        return str(v)


class AddRoomsRequest(BaseModel):
    """客室一括登録リクエストモデル

    rooms（JSON）と rooms_csv（roomNumber,price,roomType 形式のテキスト）の
    どちらか、または両方を指定する。
    """

    rooms: list[RoomRequest] = Field(default_factory=list)
    rooms_csv: str | None = Field(default=None, description="CSV テキスト")
