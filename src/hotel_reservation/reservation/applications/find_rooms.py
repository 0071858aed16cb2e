from dataclasses import dataclass, field

from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.enum import RoomSearchType
from hotel_reservation.reservation.domain.repository import ReservationRepository
from hotel_reservation.reservation.domain.service import is_available
from hotel_reservation.reservation.domain.value_object import StayPeriod
from hotel_reservation.room.domain.entity import Room
from hotel_reservation.room.domain.repository import RoomRepository
from hotel_reservation.shared.utils import get_logger

logger = get_logger("reservation")

RECOMMENDATION_OFFSET_DAYS = 7


@dataclass
class RoomSearchResult:
    """空室検索の結果

    is_recommendation が True の場合、stay_period は元の期間をずらした推奨期間。
    """

    stay_period: StayPeriod
    rooms: list[Room] = field(default_factory=list)
    is_recommendation: bool = False


class FindRoomsService:
    """空室検索のユースケース"""

    def __init__(
        self,
        room_repository: RoomRepository,
        reservation_repository: ReservationRepository,
        recommendation_offset_days: int = RECOMMENDATION_OFFSET_DAYS,
    ) -> None:
        self._room_repository = room_repository
        self._reservation_repository = reservation_repository
        self._recommendation_offset_days = recommendation_offset_days

    def find_rooms(
        self, stay_period: StayPeriod, search_type: RoomSearchType
    ) -> list[Room]:
        """期間内に予約可能で、料金フィルタに合う客室を返す"""
        reservations = self._reservation_repository.find_all()
        return [
            room
            for room in self._room_repository.find_all()
            if _matches_search_type(room, search_type)
            and is_available(_for_room(reservations, room), room, stay_period)
        ]

    def search(
        self, stay_period: StayPeriod, search_type: RoomSearchType
    ) -> RoomSearchResult:
        """空室を検索し、見つからなければ期間をずらして1回だけ再検索する"""
        rooms = self.find_rooms(stay_period, search_type)
        if rooms:
            return RoomSearchResult(stay_period=stay_period, rooms=rooms)

        try:
            recommended_period = stay_period.shift(self._recommendation_offset_days)
        except OverflowError:
            # 暦の範囲外にずれる場合は推奨なし
            logger.info("No rooms available", extra={"stay_period": str(stay_period)})
            return RoomSearchResult(stay_period=stay_period)

        recommended_rooms = self.find_rooms(recommended_period, search_type)
        if not recommended_rooms:
            logger.info("No rooms available", extra={"stay_period": str(stay_period)})
            return RoomSearchResult(stay_period=stay_period)

        logger.info(
            "Recommending alternative dates",
            extra={
                "stay_period": str(stay_period),
                "recommended_period": str(recommended_period),
                "room_count": len(recommended_rooms),
            },
        )
        return RoomSearchResult(
            stay_period=recommended_period,
            rooms=recommended_rooms,
            is_recommendation=True,
        )


def _for_room(reservations: list[Reservation], room: Room) -> list[Reservation]:
    return [r for r in reservations if r.room == room]


def _matches_search_type(room: Room, search_type: RoomSearchType) -> bool:
    if search_type == RoomSearchType.FREE_ROOMS:
        return room.is_free
    if search_type == RoomSearchType.PAID_ROOMS:
        return not room.is_free
    if search_type == RoomSearchType.BOTH:
        return True
    raise ValueError(f"Invalid room search type: {search_type!r}")
