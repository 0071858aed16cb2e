from abc import abstractmethod

from hotel_reservation.room.domain.entity.room import Room
from hotel_reservation.room.domain.value_object.room_number import RoomNumber
from hotel_reservation.shared.domain import Repository


class RoomRepository(Repository[Room, RoomNumber]):
    """客室カタログのインターフェース"""

    @abstractmethod
    def add(self, room: Room) -> bool:
        """同じ部屋番号が未登録の場合のみ追加する

        Returns:
            bool: 追加した場合 True、既に存在した場合 False（例外は送出しない）
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, room_number: RoomNumber) -> Room | None:
        """部屋番号で検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Room]:
        """全客室を取得する（順序は保証しない）"""
        raise NotImplementedError
