from threading import Lock

from hotel_reservation.room.domain.entity import Room
from hotel_reservation.room.domain.repository import RoomRepository
from hotel_reservation.room.domain.value_object import RoomNumber


class InMemoryRoomRepository(RoomRepository):
    """プロセス内メモリに客室を保持する RoomRepository の具象実装"""

    def __init__(self) -> None:
        self._rooms: dict[RoomNumber, Room] = {}
        self._lock = Lock()

    def add(self, room: Room) -> bool:
        """部屋番号が未登録なら追加する（条件付き書き込み）"""
        with self._lock:
            if room.room_number in self._rooms:
                return False
            self._rooms[room.room_number] = room
            return True

    def find_by_id(self, room_number: RoomNumber) -> Room | None:
        with self._lock:
            return self._rooms.get(room_number)

    def find_all(self) -> list[Room]:
        with self._lock:
            return list(self._rooms.values())
