from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.bootstrap import container
from hotel_reservation.reservation.applications import ReserveRoomService
from hotel_reservation.reservation.domain.value_object import StayPeriod
from hotel_reservation.reservation.handlers.request_models import ReserveRoomRequest
from hotel_reservation.reservation.handlers.response_models import (
    to_reservation_response,
)
from hotel_reservation.room.applications import GetRoomsService
from hotel_reservation.shared.domain.exception import RoomNotFoundException
from hotel_reservation.shared.utils import error_response, is_client_error

logger = Logger()

room_service = GetRoomsService(repository=container.room_repository)
service = ReserveRoomService(
    customer_repository=container.customer_repository,
    reservation_repository=container.reservation_repository,
)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """客室予約 Lambda Handler"""
    logger.info("Received reserve room request")

    try:
        payload = event.get("Payload", event)
        request = ReserveRoomRequest.model_validate(payload)

        room = room_service.get_room(request.room_number)
        if room is None:
            raise RoomNotFoundException(request.room_number)

        stay_period = StayPeriod.from_iso(request.check_in_date, request.check_out_date)
        reservation = service.reserve(request.customer_email, room, stay_period)
        return to_reservation_response(reservation)

    except Exception as e:
        if not is_client_error(e):
            logger.exception("Failed to reserve room")
        else:
            logger.warning("Rejected reserve room request", extra={"error": str(e)})
        return error_response(e)
