from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.customer.domain.repository import CustomerRepository


class RegisterCustomerService:
    """顧客登録のユースケース"""

    def __init__(self, repository: CustomerRepository) -> None:
        self._repository = repository

    def register(self, email: str, first_name: str, last_name: str) -> Customer:
        """顧客を登録する

        Raises:
            ValidationException: 氏名が空、またはメールアドレスの形式が不正な場合
            DuplicateCustomerEmailException: メールアドレスが登録済みの場合
        """
        customer = Customer.create(email, first_name, last_name)
        self._repository.save(customer)
        return customer
