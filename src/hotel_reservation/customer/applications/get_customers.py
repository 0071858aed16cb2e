from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.customer.domain.repository import CustomerRepository
from hotel_reservation.customer.domain.value_object import Email
from hotel_reservation.shared.domain.exception import ValidationException


class GetCustomersService:
    """顧客参照のユースケース"""

    def __init__(self, repository: CustomerRepository) -> None:
        self._repository = repository

    def get_customer(self, email: str) -> Customer | None:
        """メールアドレスで顧客を取得する

        存在しない場合、またはメールアドレスとして解釈できない場合は None
        """
        try:
            customer_email = Email(email)
        except ValidationException:
            return None
        return self._repository.find_by_id(customer_email)

    def list_customers(self) -> list[Customer]:
        return self._repository.find_all()
