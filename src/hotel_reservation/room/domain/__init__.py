from .entity import Room
from .enum import RoomType
from .factory import RoomDetails, RoomFactory
from .repository import RoomRepository
from .value_object import RoomNumber

__all__ = [
    "Room",
    "RoomNumber",
    "RoomType",
    "RoomRepository",
    "RoomFactory",
    "RoomDetails",
]
