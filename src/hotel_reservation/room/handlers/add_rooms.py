from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.bootstrap import container
from hotel_reservation.room.applications import AddRoomsService
from hotel_reservation.room.domain.entity import Room
from hotel_reservation.room.domain.factory import RoomFactory
from hotel_reservation.room.handlers.request_models import AddRoomsRequest
from hotel_reservation.room.handlers.response_models import (
    InvalidRoomData,
    to_add_rooms_response,
)
from hotel_reservation.room.infrastructure import parse_rooms_csv
from hotel_reservation.shared.domain.exception import ValidationException
from hotel_reservation.shared.utils import error_response, is_client_error

logger = Logger()

factory = RoomFactory()
service = AddRoomsService(repository=container.room_repository)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """客室一括登録 Lambda Handler

    重複した部屋番号は conflicts、検証エラーの客室は invalid として返し、
    残りの客室の登録は継続する。
    """
    logger.info("Received add rooms request")

    try:
        payload = event.get("Payload", event)
        request = AddRoomsRequest.model_validate(payload)

        rooms, invalid = _build_rooms(request)
        if request.rooms_csv:
            rooms.extend(parse_rooms_csv(request.rooms_csv.splitlines(), factory))

        result = service.add_rooms(rooms)
        return to_add_rooms_response(result, invalid)

    except Exception as e:
        if not is_client_error(e):
            logger.exception("Failed to add rooms")
        else:
            logger.warning("Rejected add rooms request", extra={"error": str(e)})
        return error_response(e)


def _build_rooms(request: AddRoomsRequest) -> tuple[list[Room], list[InvalidRoomData]]:
    """リクエストから客室を生成する。不正な客室は invalid に集める"""
    rooms: list[Room] = []
    invalid: list[InvalidRoomData] = []

    for item in request.rooms:
        try:
            rooms.append(
                factory.create(
                    {
                        "room_number": item.room_number,
                        "price_amount": item.price_amount,
                        "room_type": item.room_type,
                    }
                )
            )
        except ValidationException as e:
            invalid.append(InvalidRoomData(room_number=item.room_number, message=str(e)))

    return rooms, invalid
