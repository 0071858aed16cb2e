from dataclasses import dataclass

from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.reservation.domain.value_object import StayPeriod
from hotel_reservation.room.domain.entity import Room

_DATE_FORMAT = "%A %B %d %Y"


@dataclass(frozen=True)
class Reservation:
    """予約

    顧客・客室・滞在期間を結びつける不変の記録。
    フィールド以外に独自の識別子は持たない。
    """

    customer: Customer
    room: Room
    stay_period: StayPeriod

    def conflicts_with(self, room: Room, stay_period: StayPeriod) -> bool:
        """同じ客室で期間が重なるかどうか"""
        return self.room == room and self.stay_period.overlaps(stay_period)

    def is_for(self, customer: Customer) -> bool:
        return self.customer == customer

    def __str__(self) -> str:
        return (
            f"Reservation{{customer={self.customer.full_name}, room={self.room}, "
            f"checkinDate={self.stay_period.check_in.strftime(_DATE_FORMAT)}, "
            f"checkoutDate={self.stay_period.check_out.strftime(_DATE_FORMAT)}}}"
        )
