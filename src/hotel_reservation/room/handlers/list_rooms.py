from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.bootstrap import container
from hotel_reservation.room.applications import GetRoomsService
from hotel_reservation.room.handlers.response_models import to_room_data
from hotel_reservation.shared.domain.exception import ValidationException
from hotel_reservation.shared.utils import api_response

logger = Logger()

service = GetRoomsService(repository=container.room_repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """客室取得 Lambda Handler

    パスパラメータ room_number があれば1件、なければ全件を返す。
    """
    path_params = event.path_parameters or {}
    room_number = path_params.get("room_number")

    try:
        if room_number is None:
            logger.info("Listing all rooms")
            rooms = [to_room_data(room).model_dump() for room in service.list_rooms()]
            return api_response(200, {"rooms": rooms, "count": len(rooms)})

        logger.info("Fetching room", extra={"room_number": room_number})
        room = service.get_room(room_number)
        if room is None:
            return api_response(404, {"message": f"Room not found: {room_number}"})
        return api_response(200, to_room_data(room).model_dump())

    except ValidationException as e:
        return api_response(400, {"message": str(e)})
    except Exception:
        logger.exception("Failed to fetch rooms")
        return api_response(500, {"message": "Internal server error"})
