from .entity import Reservation
from .enum import RoomSearchType
from .repository import ReservationRepository
from .service import is_available
from .value_object import StayPeriod

__all__ = [
    "Reservation",
    "ReservationRepository",
    "RoomSearchType",
    "StayPeriod",
    "is_available",
]
