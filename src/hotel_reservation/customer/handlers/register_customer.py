from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.bootstrap import container
from hotel_reservation.customer.applications import RegisterCustomerService
from hotel_reservation.customer.handlers.request_models import RegisterCustomerRequest
from hotel_reservation.customer.handlers.response_models import to_response
from hotel_reservation.shared.utils import error_response, is_client_error

logger = Logger()

service = RegisterCustomerService(repository=container.customer_repository)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """顧客登録 Lambda Handler"""
    logger.info("Received register customer request")

    try:
        payload = event.get("Payload", event)
        request = RegisterCustomerRequest.model_validate(payload)
        customer = service.register(
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
        )
        logger.info("Registered customer", extra={"email": str(customer.email)})
        return to_response(customer)

    except Exception as e:
        if not is_client_error(e):
            logger.exception("Failed to register customer")
        else:
            logger.warning("Rejected register customer request", extra={"error": str(e)})
        return error_response(e)
