from decimal import Decimal
from typing import TypedDict

from hotel_reservation.room.domain.entity.room import Room
from hotel_reservation.room.domain.enum.room_type import RoomType
from hotel_reservation.room.domain.value_object.room_number import RoomNumber
from hotel_reservation.shared.domain import Money


class RoomDetails(TypedDict):
    """客室の入力データ"""

    room_number: str
    price_amount: Decimal | str
    room_type: str


class RoomFactory:
    """客室エンティティを生成するFactory"""

    def create(self, room_details: RoomDetails) -> Room:
        """入力データを検証して客室を生成する"""
        return Room(
            id=RoomNumber(room_details["room_number"]),
            price=Money.usd(room_details["price_amount"]),
            room_type=RoomType.from_token(room_details["room_type"]),
        )
