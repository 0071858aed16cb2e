import pytest

from hotel_reservation.reservation.applications import (
    GetCustomerReservationsService,
    ListReservationsService,
)
from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.shared.domain.exception import CustomerNotFoundException


class TestGetCustomerReservationsService:
    @pytest.fixture
    def service(self, customer_repository, reservation_repository):
        return GetCustomerReservationsService(
            customer_repository=customer_repository,
            reservation_repository=reservation_repository,
        )

    def test_customer_without_reservations_returns_empty(
        self, service, customer_repository, create_customer
    ):
        customer_repository.save(create_customer())
        assert service.get("jane@example.com") == []

    def test_returns_only_customer_reservations(
        self,
        service,
        customer_repository,
        reservation_repository,
        create_customer,
        create_room,
        period,
    ):
        jane = create_customer(email="jane@example.com")
        john = create_customer(email="john@example.com")
        customer_repository.save(jane)
        customer_repository.save(john)
        janes = Reservation(
            customer=jane, room=create_room(room_number="101"), stay_period=period("2024-01-10", "2024-01-12")
        )
        reservation_repository.save(janes)
        reservation_repository.save(
            Reservation(
                customer=john, room=create_room(room_number="102"), stay_period=period("2024-01-10", "2024-01-12")
            )
        )

        assert service.get("jane@example.com") == [janes]

    def test_unknown_customer_raises_error(self, service):
        with pytest.raises(CustomerNotFoundException):
            service.get("nobody@example.com")

    def test_malformed_email_raises_customer_not_found(self, service):
        with pytest.raises(CustomerNotFoundException, match="not-an-email"):
            service.get("not-an-email")


class TestListReservationsService:
    def test_list_all(self, reservation_repository, create_customer, create_room, period):
        reservation = Reservation(
            customer=create_customer(), room=create_room(), stay_period=period("2024-01-10", "2024-01-12")
        )
        reservation_repository.save(reservation)

        assert ListReservationsService(repository=reservation_repository).list_all() == [
            reservation
        ]
