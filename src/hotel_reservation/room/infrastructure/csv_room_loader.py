import csv
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from pathlib import Path

from hotel_reservation.room.domain.entity import Room
from hotel_reservation.room.domain.factory import RoomFactory
from hotel_reservation.shared.domain.exception import ValidationException

_FIELD_COUNT = 3


def parse_rooms_csv(
    lines: Iterable[str], factory: RoomFactory | None = None
) -> list[Room]:
    """`roomNumber,price,roomType` 形式の行から客室を生成する

    - 空行は無視する
    - 部屋種別は大文字小文字を区別しない
    - 不正な行があれば行番号付きで ValidationException を送出する
    """
    factory = factory or RoomFactory()
    rooms: list[Room] = []

    for line_no, values in enumerate(csv.reader(lines), start=1):
        if not values or all(not v.strip() for v in values):
            continue
        if len(values) < _FIELD_COUNT:
            raise ValidationException(
                f"Line {line_no}: each line must have 3 values separated by "
                "commas: roomNumber, price, roomType"
            )

        room_number, price, room_type = (v.strip() for v in values[:_FIELD_COUNT])
        try:
            price_amount = Decimal(price)
        except InvalidOperation as e:
            raise ValidationException(f"Line {line_no}: invalid price {price!r}") from e

        try:
            rooms.append(
                factory.create(
                    {
                        "room_number": room_number,
                        "price_amount": price_amount,
                        "room_type": room_type,
                    }
                )
            )
        except ValidationException as e:
            raise ValidationException(f"Line {line_no}: {e}") from e

    return rooms


def load_rooms_from_csv(path: str | Path) -> list[Room]:
    """CSV ファイルを読み込んで客室のリストを返す"""
    with open(path, newline="", encoding="utf-8") as f:
        return parse_rooms_csv(f)
