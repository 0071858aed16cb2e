from dataclasses import dataclass

from hotel_reservation.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    例: USD, EUR, JPY
    """

    code: str

    def __post_init__(self) -> None:
        if len(self.code) != 3 or not self.code.isalpha():
            raise ValidationException(f"Invalid currency code: {self.code}")
        # frozen=True でも __post_init__ 内では object.__setattr__ が必要
        object.__setattr__(self, "code", self.code.upper())

    def __str__(self) -> str:
        return self.code

    @classmethod
    def usd(cls) -> "Currency":
        """米ドル"""
        return cls("USD")
