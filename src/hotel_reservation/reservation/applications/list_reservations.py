from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.repository import ReservationRepository


class ListReservationsService:
    """全予約を参照するユースケース（管理者向け）"""

    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    def list_all(self) -> list[Reservation]:
        return self._repository.find_all()
