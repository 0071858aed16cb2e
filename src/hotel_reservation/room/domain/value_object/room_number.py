import re
from dataclasses import dataclass

from hotel_reservation.shared.domain.exception import ValidationException

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class RoomNumber:
    """部屋番号

    正の整数として解釈できる文字列のみ許可する（空白・区切り文字は不可）。
    同じ値を持つ RoomNumber は同一とみなされる。
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _INTEGER_PATTERN.fullmatch(self.value):
            raise ValidationException(
                f"Room number must be a positive integer: {self.value!r}"
            )
        if int(self.value) <= 0:
            raise ValidationException(
                f"Room number must be a positive integer: {self.value!r}"
            )

    def __str__(self) -> str:
        return self.value
