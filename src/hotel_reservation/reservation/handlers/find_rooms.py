from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.bootstrap import container
from hotel_reservation.reservation.applications import FindRoomsService
from hotel_reservation.reservation.domain.value_object import StayPeriod
from hotel_reservation.reservation.handlers.request_models import FindRoomsRequest
from hotel_reservation.reservation.handlers.response_models import to_search_response
from hotel_reservation.shared.utils import error_response, is_client_error

logger = Logger()

service = FindRoomsService(
    room_repository=container.room_repository,
    reservation_repository=container.reservation_repository,
)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """空室検索 Lambda Handler

    指定期間に空室がなければ 7 日後の期間を推奨として返す。
    """
    logger.info("Received find rooms request")

    try:
        payload = event.get("Payload", event)
        request = FindRoomsRequest.model_validate(payload)
        stay_period = StayPeriod.from_iso(request.check_in_date, request.check_out_date)
        result = service.search(stay_period, request.search_type)
        return to_search_response(result)

    except Exception as e:
        if not is_client_error(e):
            logger.exception("Failed to find rooms")
        else:
            logger.warning("Rejected find rooms request", extra={"error": str(e)})
        return error_response(e)
