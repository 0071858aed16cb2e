from .csv_room_loader import load_rooms_from_csv, parse_rooms_csv
from .in_memory_room_repository import InMemoryRoomRepository

__all__ = ["InMemoryRoomRepository", "load_rooms_from_csv", "parse_rooms_csv"]
