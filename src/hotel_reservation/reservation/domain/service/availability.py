from collections.abc import Iterable

from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.value_object import StayPeriod
from hotel_reservation.room.domain.entity import Room


def is_available(
    reservations: Iterable[Reservation], room: Room, stay_period: StayPeriod
) -> bool:
    """客室が指定期間に予約可能かどうか

    同じ客室の既存予約のうち、期間が重なるもの（端点の一致を含む）が
    1件もなければ予約可能。
    """
    return not any(r.conflicts_with(room, stay_period) for r in reservations)
