from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from hotel_reservation.shared.domain.exception import ValidationException

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報を含む）

    Value Object として不変性を保証。
    0 は無料を表す。負の金額は許可しない。
    """

    amount: Decimal
    currency: Currency = field(default_factory=Currency.usd)

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, "amount", Decimal(str(self.amount)))
            except InvalidOperation as e:
                raise ValidationException(f"Invalid amount: {self.amount}") from e
        if not self.amount.is_finite():
            raise ValidationException(f"Invalid amount: {self.amount}")
        if self.amount < 0:
            raise ValidationException("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

    def is_zero(self) -> bool:
        """金額が 0 かどうか"""
        return self.amount == 0

    @classmethod
    def usd(cls, amount: Decimal | int | str) -> "Money":
        """米ドルで Money を生成"""
        return cls(amount=amount, currency=Currency.usd())

    @classmethod
    def zero(cls) -> "Money":
        """無料（0 USD）"""
        return cls.usd(0)
