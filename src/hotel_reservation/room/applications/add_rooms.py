from dataclasses import dataclass, field

from hotel_reservation.room.domain.entity import Room
from hotel_reservation.room.domain.repository import RoomRepository
from hotel_reservation.shared.utils import get_logger

logger = get_logger("room")


@dataclass
class AddRoomsResult:
    """一括登録の結果

    conflicts には既に登録済みでスキップした部屋番号が入る。
    """

    added: list[Room] = field(default_factory=list)
    conflicts: list[str] = field(default_factory=list)


class AddRoomsService:
    """客室登録のユースケース"""

    def __init__(self, repository: RoomRepository) -> None:
        self._repository = repository

    def add_room(self, room: Room) -> bool:
        """客室を1件登録する。部屋番号が重複していれば登録せず False を返す"""
        added = self._repository.add(room)
        if added:
            logger.info("Added room", extra={"room_number": str(room.room_number)})
        else:
            logger.warning(
                "Room already exists, skipping",
                extra={"room_number": str(room.room_number)},
            )
        return added

    def add_rooms(self, rooms: list[Room]) -> AddRoomsResult:
        """客室を一括登録する

        重複した部屋はスキップして conflicts に記録し、残りの登録は継続する。
        """
        result = AddRoomsResult()
        for room in rooms:
            if self.add_room(room):
                result.added.append(room)
            else:
                result.conflicts.append(str(room.room_number))
        return result
