from abc import abstractmethod

from hotel_reservation.customer.domain.entity.customer import Customer
from hotel_reservation.customer.domain.value_object.email import Email
from hotel_reservation.shared.domain import Repository


class CustomerRepository(Repository[Customer, Email]):
    """顧客ディレクトリのインターフェース"""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """顧客を登録する

        Raises:
            DuplicateCustomerEmailException: 同じメールアドレスが登録済みの場合
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, email: Email) -> Customer | None:
        """メールアドレスで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Customer]:
        """全顧客を取得する"""
        raise NotImplementedError
