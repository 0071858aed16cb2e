from hotel_reservation.customer.applications import GetCustomersService
from hotel_reservation.customer.domain.repository import CustomerRepository
from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.repository import ReservationRepository
from hotel_reservation.shared.domain.exception import CustomerNotFoundException


class GetCustomerReservationsService:
    """顧客の予約一覧を取得するユースケース"""

    def __init__(
        self,
        customer_repository: CustomerRepository,
        reservation_repository: ReservationRepository,
    ) -> None:
        self._customers = GetCustomersService(customer_repository)
        self._reservation_repository = reservation_repository

    def get(self, customer_email: str) -> list[Reservation]:
        """予約がなければ空リストを返す

        Raises:
            CustomerNotFoundException: 顧客が登録されていない場合
        """
        customer = self._customers.get_customer(customer_email)
        if customer is None:
            raise CustomerNotFoundException(customer_email)
        return self._reservation_repository.find_by_customer(customer)
