import pytest

from hotel_reservation.reservation.applications import FindRoomsService
from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.enum import RoomSearchType


class TestFindRoomsService:
    @pytest.fixture
    def service(self, room_repository, reservation_repository):
        return FindRoomsService(
            room_repository=room_repository,
            reservation_repository=reservation_repository,
        )

    @pytest.fixture
    def book(self, reservation_repository, create_customer):
        def _book(room, stay_period):
            reservation_repository.save(
                Reservation(customer=create_customer(), room=room, stay_period=stay_period)
            )

        return _book

    @pytest.mark.parametrize(
        ("search_type", "expected"),
        [
            (RoomSearchType.FREE_ROOMS, {"1", "2"}),
            (RoomSearchType.PAID_ROOMS, {"3", "4", "5"}),
            (RoomSearchType.BOTH, {"1", "2", "3", "4", "5"}),
        ],
    )
    def test_search_type_filter(
        self, service, room_repository, create_room, period, search_type, expected
    ):
        for number in ("1", "2"):
            room_repository.add(create_room(room_number=number, price_amount="0"))
        for number in ("3", "4", "5"):
            room_repository.add(create_room(room_number=number, price_amount="100"))

        rooms = service.find_rooms(period("2024-01-10", "2024-01-15"), search_type)

        assert {str(r.room_number) for r in rooms} == expected

    def test_booked_rooms_are_excluded(
        self, service, room_repository, create_room, period, book
    ):
        booked = create_room(room_number="101")
        room_repository.add(booked)
        room_repository.add(create_room(room_number="102"))
        book(booked, period("2024-01-10", "2024-01-15"))

        rooms = service.find_rooms(period("2024-01-15", "2024-01-18"), RoomSearchType.BOTH)

        assert [str(r.room_number) for r in rooms] == ["102"]

    def test_empty_catalog_returns_empty(self, service, period):
        assert service.find_rooms(period("2024-01-10", "2024-01-15"), RoomSearchType.BOTH) == []

    def test_invalid_search_type_raises_error(
        self, service, room_repository, create_room, period
    ):
        room_repository.add(create_room())
        with pytest.raises(ValueError, match="Invalid room search type"):
            service.find_rooms(period("2024-01-10", "2024-01-15"), "CHEAP_ROOMS")


class TestFindRoomsServiceSearch:
    @pytest.fixture
    def service(self, room_repository, reservation_repository):
        return FindRoomsService(
            room_repository=room_repository,
            reservation_repository=reservation_repository,
        )

    @pytest.fixture
    def room_x(self, room_repository, reservation_repository, create_room, create_customer, period):
        room = create_room(room_number="42")
        room_repository.add(room)
        reservation_repository.save(
            Reservation(
                customer=create_customer(),
                room=room,
                stay_period=period("2024-01-30", "2024-02-05"),
            )
        )
        return room

    def test_available_rooms_are_returned_without_recommendation(
        self, service, room_repository, create_room, period
    ):
        room_repository.add(create_room(room_number="101"))
        stay_period = period("2024-02-01", "2024-02-03")

        result = service.search(stay_period, RoomSearchType.BOTH)

        assert result.stay_period == stay_period
        assert not result.is_recommendation
        assert [str(r.room_number) for r in result.rooms] == ["101"]

    def test_recommends_rooms_a_week_later(self, service, room_x, period):
        original = period("2024-02-01", "2024-02-03")

        assert service.find_rooms(original, RoomSearchType.BOTH) == []
        result = service.search(original, RoomSearchType.BOTH)

        assert result.is_recommendation
        assert result.stay_period == period("2024-02-08", "2024-02-10")
        assert result.rooms == [room_x]

    def test_recommendation_keeps_search_type(self, service, room_x, period):
        # room_x は有料のため、無料の部屋だけを探すと推奨も見つからない
        result = service.search(period("2024-02-01", "2024-02-03"), RoomSearchType.FREE_ROOMS)

        assert result.rooms == []
        assert not result.is_recommendation

    def test_no_rooms_in_either_window(self, service, room_x, reservation_repository, create_customer, period):
        reservation_repository.save(
            Reservation(
                customer=create_customer(),
                room=room_x,
                stay_period=period("2024-02-07", "2024-02-12"),
            )
        )
        original = period("2024-02-01", "2024-02-03")

        result = service.search(original, RoomSearchType.BOTH)

        assert result.rooms == []
        assert not result.is_recommendation
        assert result.stay_period == original

    def test_custom_offset(self, room_repository, reservation_repository, room_x, period):
        service = FindRoomsService(
            room_repository=room_repository,
            reservation_repository=reservation_repository,
            recommendation_offset_days=14,
        )

        result = service.search(period("2024-02-01", "2024-02-03"), RoomSearchType.BOTH)

        assert result.stay_period == period("2024-02-15", "2024-02-17")

    def test_no_recommendation_near_end_of_calendar(self, service, period):
        original = period("9999-12-28", "9999-12-30")

        result = service.search(original, RoomSearchType.BOTH)

        assert result.rooms == []
        assert not result.is_recommendation
        assert result.stay_period == original
