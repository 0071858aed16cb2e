from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.bootstrap import container
from hotel_reservation.customer.applications import GetCustomersService
from hotel_reservation.customer.handlers.response_models import to_customer_data
from hotel_reservation.shared.utils import api_response

logger = Logger()

service = GetCustomersService(repository=container.customer_repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """顧客一覧取得 Lambda Handler（管理者向け）"""

    logger.info("Listing all customers")

    try:
        customers = [
            to_customer_data(customer).model_dump()
            for customer in service.list_customers()
        ]
        return api_response(200, {"customers": customers, "count": len(customers)})

    except Exception:
        logger.exception("Failed to list customers")
        return api_response(500, {"message": "Internal server error"})
