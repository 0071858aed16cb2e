from enum import Enum

from hotel_reservation.shared.domain.exception import ValidationException


class RoomType(str, Enum):
    """部屋の種別（シングル / ダブル）"""

    SINGLE = "SINGLE"
    DOUBLE = "DOUBLE"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_token(cls, token: str) -> "RoomType":
        """大文字小文字を区別せずに種別名から変換する"""
        try:
            return cls(token.strip().upper())
        except ValueError as e:
            raise ValidationException(f"Unknown room type: {token!r}") from e


_DISPLAY_NAMES = {
    RoomType.SINGLE: "Single Bed Room",
    RoomType.DOUBLE: "Double Bed Room",
}
