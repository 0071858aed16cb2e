from .add_rooms import AddRoomsResult, AddRoomsService
from .get_rooms import GetRoomsService

__all__ = ["AddRoomsService", "AddRoomsResult", "GetRoomsService"]
