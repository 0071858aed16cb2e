import json

import pytest

from hotel_reservation.customer.applications import (
    GetCustomersService,
    RegisterCustomerService,
)
from hotel_reservation.customer.handlers import list_customers, register_customer


class TestRegisterCustomerHandler:
    @pytest.fixture(autouse=True)
    def _service(self, monkeypatch, customer_repository):
        monkeypatch.setattr(
            register_customer,
            "service",
            RegisterCustomerService(repository=customer_repository),
        )

    def test_register(self, lambda_context):
        event = {"email": "jane@example.com", "first_name": "Jane", "last_name": "Doe"}

        response = register_customer.lambda_handler(event, lambda_context)

        assert response == {
            "status": "success",
            "data": {"email": "jane@example.com", "first_name": "Jane", "last_name": "Doe"},
        }

    def test_duplicate_email(self, lambda_context):
        event = {"email": "jane@example.com", "first_name": "Jane", "last_name": "Doe"}
        register_customer.lambda_handler(event, lambda_context)

        response = register_customer.lambda_handler(event, lambda_context)

        assert response["error_code"] == "DUPLICATE_CUSTOMER"

    def test_invalid_email(self, lambda_context):
        event = {"email": "jane@", "first_name": "Jane", "last_name": "Doe"}

        response = register_customer.lambda_handler(event, lambda_context)

        assert response["error_code"] == "VALIDATION_ERROR"

    def test_missing_field(self, lambda_context):
        response = register_customer.lambda_handler(
            {"email": "jane@example.com"}, lambda_context
        )

        assert response["error_code"] == "VALIDATION_ERROR"
        assert "details" in response


class TestListCustomersHandler:
    def test_list(self, monkeypatch, customer_repository, create_customer, lambda_context):
        customer_repository.save(create_customer())
        monkeypatch.setattr(
            list_customers, "service", GetCustomersService(repository=customer_repository)
        )

        response = list_customers.lambda_handler({}, lambda_context)

        body = json.loads(response["body"])
        assert response["statusCode"] == 200
        assert body["customers"] == [
            {"email": "jane@example.com", "first_name": "Jane", "last_name": "Doe"}
        ]
