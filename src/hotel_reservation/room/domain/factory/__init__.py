from .room_factory import RoomDetails, RoomFactory

__all__ = ["RoomFactory", "RoomDetails"]
