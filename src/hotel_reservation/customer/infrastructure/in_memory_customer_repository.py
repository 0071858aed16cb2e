from threading import Lock

from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.customer.domain.repository import CustomerRepository
from hotel_reservation.customer.domain.value_object import Email
from hotel_reservation.shared.domain.exception import DuplicateCustomerEmailException


class InMemoryCustomerRepository(CustomerRepository):
    """プロセス内メモリに顧客を保持する CustomerRepository の具象実装"""

    def __init__(self) -> None:
        self._customers: dict[Email, Customer] = {}
        self._lock = Lock()

    def save(self, customer: Customer) -> None:
        """顧客を保存する（メールアドレスが未登録の場合のみ）"""
        with self._lock:
            if customer.email in self._customers:
                raise DuplicateCustomerEmailException(str(customer.email))
            self._customers[customer.email] = customer

    def find_by_id(self, email: Email) -> Customer | None:
        with self._lock:
            return self._customers.get(email)

    def find_all(self) -> list[Customer]:
        with self._lock:
            return list(self._customers.values())
