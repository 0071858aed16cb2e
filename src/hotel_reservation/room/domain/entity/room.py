from hotel_reservation.room.domain.enum import RoomType
from hotel_reservation.room.domain.value_object import RoomNumber
from hotel_reservation.shared.domain import Entity, Money


class Room(Entity[RoomNumber]):
    """客室エンティティ

    - 同一性は部屋番号のみで判定する（料金・種別が違っても同じ部屋）
    - 生成後は不変
    - 料金 0 の部屋を「無料の部屋」として扱う
    """

    def __init__(self, id: RoomNumber, price: Money, room_type: RoomType) -> None:
        super().__init__(id)
        self._price = price
        self._room_type = room_type

    @property
    def room_number(self) -> RoomNumber:
        return self._id

    @property
    def price(self) -> Money:
        return self._price

    @property
    def room_type(self) -> RoomType:
        return self._room_type

    @property
    def is_free(self) -> bool:
        return self._price.is_zero()

    def __str__(self) -> str:
        price = "(Free)" if self.is_free else f"${self._price.amount:.2f}"
        return (
            f"Room number: {self.room_number}, "
            f"Room type: {self.room_type.display_name}, Price: {price}"
        )

    def __repr__(self) -> str:
        return f"Room(room_number={self.room_number.value!r})"
