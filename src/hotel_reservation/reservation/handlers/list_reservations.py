from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.bootstrap import container
from hotel_reservation.reservation.applications import ListReservationsService
from hotel_reservation.reservation.handlers.response_models import to_reservation_data
from hotel_reservation.shared.utils import api_response

logger = Logger()

service = ListReservationsService(repository=container.reservation_repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """全予約一覧取得 Lambda Handler（管理者向け）"""

    logger.info("Listing all reservations")

    try:
        reservations = [to_reservation_data(r).model_dump() for r in service.list_all()]
        return api_response(
            200, {"reservations": reservations, "count": len(reservations)}
        )

    except Exception:
        logger.exception("Failed to list reservations")
        return api_response(500, {"message": "Internal server error"})
