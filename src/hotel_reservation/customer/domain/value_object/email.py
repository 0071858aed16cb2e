import re
from dataclasses import dataclass

from hotel_reservation.shared.domain.exception import ValidationException

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


@dataclass(frozen=True)
class Email:
    """メールアドレス（顧客の識別子）

    例: example@domain.com, example@domain.co.uk
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _EMAIL_PATTERN.match(self.value):
            raise ValidationException(
                f"Invalid email format: {self.value!r}. "
                "Please use the format: example@domain.com"
            )

    def __str__(self) -> str:
        return self.value
