from .room_number import RoomNumber

__all__ = ["RoomNumber"]
