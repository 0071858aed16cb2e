from hotel_reservation.customer.applications import GetCustomersService
from hotel_reservation.customer.domain.repository import CustomerRepository
from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.repository import ReservationRepository
from hotel_reservation.reservation.domain.value_object import StayPeriod
from hotel_reservation.room.domain.entity import Room
from hotel_reservation.shared.domain.exception import (
    CustomerNotFoundException,
    RoomUnavailableException,
)
from hotel_reservation.shared.utils import get_logger

logger = get_logger("reservation")


class ReserveRoomService:
    """客室予約のユースケース"""

    def __init__(
        self,
        customer_repository: CustomerRepository,
        reservation_repository: ReservationRepository,
    ) -> None:
        self._customers = GetCustomersService(customer_repository)
        self._reservation_repository = reservation_repository

    def reserve(
        self, customer_email: str, room: Room, stay_period: StayPeriod
    ) -> Reservation:
        """客室を予約する

        Raises:
            CustomerNotFoundException: 顧客が登録されていない場合
            RoomUnavailableException: 期間が重なる予約が存在する場合
        """
        # 1. 顧客を解決
        customer = self._customers.get_customer(customer_email)
        if customer is None:
            raise CustomerNotFoundException(customer_email)

        # 2. 空室確認（確定は save 内で再確認される）
        if not self._reservation_repository.is_available(room, stay_period):
            logger.info(
                "Room is not available",
                extra={"room_number": str(room.room_number), "stay_period": str(stay_period)},
            )
            raise RoomUnavailableException(
                str(room.room_number), stay_period.check_in, stay_period.check_out
            )

        # 3. 予約を追加
        reservation = Reservation(customer=customer, room=room, stay_period=stay_period)
        self._reservation_repository.save(reservation)

        logger.info(
            "Reserved room",
            extra={
                "room_number": str(room.room_number),
                "customer_email": customer_email,
                "stay_period": str(stay_period),
            },
        )
        return reservation
