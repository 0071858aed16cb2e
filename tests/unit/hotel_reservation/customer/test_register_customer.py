from unittest.mock import MagicMock

import pytest

from hotel_reservation.customer.applications import (
    GetCustomersService,
    RegisterCustomerService,
)
from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.shared.domain.exception import (
    DuplicateCustomerEmailException,
    ValidationException,
)


class TestRegisterCustomerService:
    def test_register_creates_and_saves_customer(self):
        mock_repository = MagicMock()
        service = RegisterCustomerService(repository=mock_repository)

        customer = service.register("jane@example.com", "Jane", "Doe")

        assert isinstance(customer, Customer)
        mock_repository.save.assert_called_once()
        saved_customer = mock_repository.save.call_args[0][0]
        assert saved_customer == customer

    def test_duplicate_email_raises_error(self, customer_repository):
        service = RegisterCustomerService(repository=customer_repository)
        service.register("jane@example.com", "Jane", "Doe")

        with pytest.raises(DuplicateCustomerEmailException):
            service.register("jane@example.com", "Another", "Person")

        assert len(customer_repository.find_all()) == 1

    def test_invalid_customer_is_not_saved(self):
        mock_repository = MagicMock()
        service = RegisterCustomerService(repository=mock_repository)

        with pytest.raises(ValidationException):
            service.register("jane@example", "Jane", "Doe")

        mock_repository.save.assert_not_called()


class TestGetCustomersService:
    def test_get_customer(self, customer_repository, create_customer):
        customer = create_customer()
        customer_repository.save(customer)
        service = GetCustomersService(repository=customer_repository)

        assert service.get_customer("jane@example.com") is customer
        assert service.get_customer("nobody@example.com") is None
        assert service.get_customer("not-an-email") is None

    def test_list_customers(self, customer_repository, create_customer):
        customer_repository.save(create_customer(email="a@example.com"))
        customer_repository.save(create_customer(email="b@example.com"))

        customers = GetCustomersService(repository=customer_repository).list_customers()

        assert {str(c.email) for c in customers} == {"a@example.com", "b@example.com"}
