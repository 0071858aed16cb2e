from dataclasses import dataclass
from datetime import date
from decimal import Decimal

import pytest

from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.customer.infrastructure import InMemoryCustomerRepository
from hotel_reservation.reservation.domain.value_object import StayPeriod
from hotel_reservation.reservation.infrastructure import InMemoryReservationRepository
from hotel_reservation.room.domain.entity import Room
from hotel_reservation.room.domain.enum import RoomType
from hotel_reservation.room.domain.value_object import RoomNumber
from hotel_reservation.room.infrastructure import InMemoryRoomRepository
from hotel_reservation.shared.domain import Money


@pytest.fixture
def create_room():
    """Room を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        room_number: str = "101",
        price_amount: Decimal | str = Decimal("150"),
        room_type: RoomType = RoomType.SINGLE,
    ) -> Room:
        return Room(
            id=RoomNumber(room_number),
            price=Money.usd(price_amount),
            room_type=room_type,
        )

    return _factory


@pytest.fixture
def create_customer():
    """Customer を生成する Factory fixture"""

    def _factory(
        email: str = "jane@example.com",
        first_name: str = "Jane",
        last_name: str = "Doe",
    ) -> Customer:
        return Customer.create(email, first_name, last_name)

    return _factory


@pytest.fixture
def period():
    """ISO 文字列から StayPeriod を生成するヘルパー"""

    def _factory(check_in: str, check_out: str) -> StayPeriod:
        return StayPeriod(
            check_in=date.fromisoformat(check_in),
            check_out=date.fromisoformat(check_out),
        )

    return _factory


@pytest.fixture
def room_repository():
    return InMemoryRoomRepository()


@pytest.fixture
def customer_repository():
    return InMemoryCustomerRepository()


@pytest.fixture
def reservation_repository():
    return InMemoryReservationRepository()


@pytest.fixture
def lambda_context():
    """テスト用の LambdaContext"""

    @dataclass
    class LambdaContext:
        function_name: str = "test"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = (
            "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
        )
        aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

    return LambdaContext()
