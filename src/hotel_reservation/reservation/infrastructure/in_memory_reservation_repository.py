from threading import Lock

from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.repository import ReservationRepository
from hotel_reservation.reservation.domain.service import is_available
from hotel_reservation.reservation.domain.value_object import StayPeriod
from hotel_reservation.room.domain.entity import Room
from hotel_reservation.room.domain.value_object import RoomNumber
from hotel_reservation.shared.domain.exception import RoomUnavailableException


class InMemoryReservationRepository(ReservationRepository):
    """プロセス内メモリに予約を保持する ReservationRepository の具象実装

    - 全件リストに加えて部屋番号ごとのインデックスを持つ
    - 読み書きはすべて 1 つのロックで直列化し、読み取りはコピーを返す
    """

    def __init__(self) -> None:
        self._reservations: list[Reservation] = []
        self._by_room: dict[RoomNumber, list[Reservation]] = {}
        self._lock = Lock()

    def save(self, reservation: Reservation) -> None:
        """空室確認と追加を同じロック内で行う"""
        room = reservation.room
        stay_period = reservation.stay_period
        with self._lock:
            if not is_available(self._by_room.get(room.room_number, []), room, stay_period):
                raise RoomUnavailableException(
                    str(room.room_number), stay_period.check_in, stay_period.check_out
                )
            self._reservations.append(reservation)
            self._by_room.setdefault(room.room_number, []).append(reservation)

    def is_available(self, room: Room, stay_period: StayPeriod) -> bool:
        with self._lock:
            return is_available(self._by_room.get(room.room_number, []), room, stay_period)

    def find_by_room(self, room_number: RoomNumber) -> list[Reservation]:
        with self._lock:
            return list(self._by_room.get(room_number, []))

    def find_by_customer(self, customer: Customer) -> list[Reservation]:
        with self._lock:
            return [r for r in self._reservations if r.is_for(customer)]

    def find_all(self) -> list[Reservation]:
        with self._lock:
            return list(self._reservations)
