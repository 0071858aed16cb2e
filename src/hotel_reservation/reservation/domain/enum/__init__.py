from .room_search_type import RoomSearchType

__all__ = ["RoomSearchType"]
