from dataclasses import dataclass

from hotel_reservation.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class PersonName:
    """氏名の一部（名 / 姓）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValidationException("Name cannot be empty")

    def __str__(self) -> str:
        return self.value
