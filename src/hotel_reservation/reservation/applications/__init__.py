from .find_rooms import RECOMMENDATION_OFFSET_DAYS, FindRoomsService, RoomSearchResult
from .get_customer_reservations import GetCustomerReservationsService
from .list_reservations import ListReservationsService
from .reserve_room import ReserveRoomService

__all__ = [
    "FindRoomsService",
    "RoomSearchResult",
    "RECOMMENDATION_OFFSET_DAYS",
    "GetCustomerReservationsService",
    "ListReservationsService",
    "ReserveRoomService",
]
