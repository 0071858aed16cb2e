from __future__ import annotations

from pydantic import BaseModel, Field

from hotel_reservation.room.applications import AddRoomsResult
from hotel_reservation.room.domain.entity import Room


class RoomData(BaseModel):
    """客室データのレスポンスモデル"""

    room_number: str
    price_amount: str
    price_currency: str
    room_type: str
    room_type_name: str
    is_free: bool


class InvalidRoomData(BaseModel):
    """登録できなかった客室"""

    room_number: str
    message: str


class AddRoomsData(BaseModel):
    """一括登録結果のレスポンスモデル"""

    added: list[str]
    conflicts: list[str]
    invalid: list[InvalidRoomData] = Field(default_factory=list)


class AddRoomsResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: AddRoomsData


def to_room_data(room: Room) -> RoomData:
    """Room エンティティをレスポンスモデルに変換する"""
    return RoomData(
        room_number=str(room.room_number),
        price_amount=f"{room.price.amount:.2f}",
        price_currency=str(room.price.currency),
        room_type=room.room_type.value,
        room_type_name=room.room_type.display_name,
        is_free=room.is_free,
    )


def to_add_rooms_response(
    result: AddRoomsResult, invalid: list[InvalidRoomData]
) -> dict:
    """一括登録結果をレスポンス辞書に変換する"""
    return AddRoomsResponse(
        data=AddRoomsData(
            added=[str(room.room_number) for room in result.added],
            conflicts=result.conflicts,
            invalid=invalid,
        )
    ).model_dump()
