from hotel_reservation.customer.domain.value_object import Email, PersonName
from hotel_reservation.shared.domain import Entity


class Customer(Entity[Email]):
    """顧客エンティティ

    - 同一性はメールアドレスのみで判定する
    - 生成後は不変
    """

    def __init__(self, id: Email, first_name: PersonName, last_name: PersonName) -> None:
        super().__init__(id)
        self._first_name = first_name
        self._last_name = last_name

    @classmethod
    def create(cls, email: str, first_name: str, last_name: str) -> "Customer":
        """文字列から検証済みの顧客を生成する"""
        return cls(
            id=Email(email),
            first_name=PersonName(first_name),
            last_name=PersonName(last_name),
        )

    @property
    def email(self) -> Email:
        return self._id

    @property
    def first_name(self) -> PersonName:
        return self._first_name

    @property
    def last_name(self) -> PersonName:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    def __str__(self) -> str:
        return f"Customer: {self.full_name}, Email: {self.email}"

    def __repr__(self) -> str:
        return f"Customer(email={self.email.value!r})"
