"""プロセス全体で共有するリポジトリを組み立てる

Lambda の実行環境ごとに 1 組のリポジトリを保持し、各ハンドラはここから
サービスを組み立てる。

環境変数:
    ROOMS_CSV_PATH: 起動時に客室カタログへ読み込む CSV ファイル（任意）
"""

import os
from dataclasses import dataclass, field

from hotel_reservation.customer.domain.repository import CustomerRepository
from hotel_reservation.customer.infrastructure import InMemoryCustomerRepository
from hotel_reservation.reservation.domain.repository import ReservationRepository
from hotel_reservation.reservation.infrastructure import InMemoryReservationRepository
from hotel_reservation.room.applications import AddRoomsService
from hotel_reservation.room.domain.repository import RoomRepository
from hotel_reservation.room.infrastructure import (
    InMemoryRoomRepository,
    load_rooms_from_csv,
)
from hotel_reservation.shared.utils import get_logger

logger = get_logger("bootstrap")


@dataclass
class Container:
    """共有リポジトリの入れ物"""

    room_repository: RoomRepository = field(default_factory=InMemoryRoomRepository)
    customer_repository: CustomerRepository = field(
        default_factory=InMemoryCustomerRepository
    )
    reservation_repository: ReservationRepository = field(
        default_factory=InMemoryReservationRepository
    )


def build_container(rooms_csv_path: str | None = None) -> Container:
    """リポジトリを生成し、指定があれば CSV から客室を読み込む"""
    container = Container()

    rooms_csv_path = rooms_csv_path or os.getenv("ROOMS_CSV_PATH")
    if rooms_csv_path:
        rooms = load_rooms_from_csv(rooms_csv_path)
        result = AddRoomsService(container.room_repository).add_rooms(rooms)
        logger.info(
            "Loaded rooms from CSV",
            extra={
                "path": rooms_csv_path,
                "added": len(result.added),
                "conflicts": result.conflicts,
            },
        )

    return container


container = build_container()
