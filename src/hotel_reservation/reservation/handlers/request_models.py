from pydantic import BaseModel, Field

from hotel_reservation.reservation.domain.enum import RoomSearchType

_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class FindRoomsRequest(BaseModel):
    """空室検索リクエストモデル"""

    check_in_date: str = Field(
        ...,
        pattern=_DATE_PATTERN,
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2024-01-10"],
    )
    check_out_date: str = Field(
        ...,
        pattern=_DATE_PATTERN,
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2024-01-15"],
    )
    search_type: RoomSearchType = Field(
        default=RoomSearchType.BOTH,
        description="料金フィルタ（FREE_ROOMS / PAID_ROOMS / BOTH）",
    )


class ReserveRoomRequest(BaseModel):
    """客室予約リクエストモデル"""

    customer_email: str = Field(..., min_length=1)
    room_number: str = Field(..., min_length=1)
    check_in_date: str = Field(..., pattern=_DATE_PATTERN)
    check_out_date: str = Field(..., pattern=_DATE_PATTERN)
