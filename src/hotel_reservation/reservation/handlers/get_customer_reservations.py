from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.bootstrap import container
from hotel_reservation.reservation.applications import GetCustomerReservationsService
from hotel_reservation.reservation.handlers.response_models import to_reservation_data
from hotel_reservation.shared.utils import (
    api_response,
    error_response,
    error_status,
    is_client_error,
)

logger = Logger()

service = GetCustomerReservationsService(
    customer_repository=container.customer_repository,
    reservation_repository=container.reservation_repository,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """顧客の予約一覧取得 Lambda Handler"""

    path_params = event.path_parameters or {}
    email = path_params.get("email")

    if not email:
        return api_response(400, {"message": "email is required"})

    logger.info("Fetching customer reservations", extra={"email": email})

    try:
        reservations = [
            to_reservation_data(r).model_dump() for r in service.get(email)
        ]
        return api_response(
            200, {"reservations": reservations, "count": len(reservations)}
        )

    except Exception as e:
        if not is_client_error(e):
            logger.exception("Failed to fetch customer reservations")
        else:
            logger.warning(
                "Rejected customer reservations request", extra={"error": str(e)}
            )
        status_code, _ = error_status(e)
        return api_response(status_code, error_response(e))
