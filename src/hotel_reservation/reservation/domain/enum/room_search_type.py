from enum import Enum


class RoomSearchType(str, Enum):
    """空室検索の料金フィルタ"""

    FREE_ROOMS = "FREE_ROOMS"
    PAID_ROOMS = "PAID_ROOMS"
    BOTH = "BOTH"
