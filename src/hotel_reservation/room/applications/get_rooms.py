from hotel_reservation.room.domain.entity import Room
from hotel_reservation.room.domain.repository import RoomRepository
from hotel_reservation.room.domain.value_object import RoomNumber


class GetRoomsService:
    """客室参照のユースケース"""

    def __init__(self, repository: RoomRepository) -> None:
        self._repository = repository

    def get_room(self, room_number: str) -> Room | None:
        """部屋番号で客室を取得する。存在しなければ None"""
        return self._repository.find_by_id(RoomNumber(room_number))

    def list_rooms(self) -> list[Room]:
        return self._repository.find_all()
