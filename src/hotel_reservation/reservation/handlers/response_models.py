from __future__ import annotations

from pydantic import BaseModel

from hotel_reservation.reservation.applications import RoomSearchResult
from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.room.handlers.response_models import RoomData, to_room_data


class ReservationData(BaseModel):
    """予約データのレスポンスモデル"""

    customer_email: str
    customer_name: str
    room: RoomData
    check_in_date: str
    check_out_date: str
    nights: int


class ReservationResponse(BaseModel):
    """予約成功レスポンスモデル"""

    status: str = "success"
    data: ReservationData


class RoomSearchData(BaseModel):
    """空室検索結果のレスポンスモデル"""

    check_in_date: str
    check_out_date: str
    is_recommendation: bool
    rooms: list[RoomData]


class RoomSearchResponse(BaseModel):
    """空室検索成功レスポンスモデル"""

    status: str = "success"
    data: RoomSearchData


def to_reservation_data(reservation: Reservation) -> ReservationData:
    """Reservation をレスポンスモデルに変換する"""
    stay_period = reservation.stay_period
    return ReservationData(
        customer_email=str(reservation.customer.email),
        customer_name=reservation.customer.full_name,
        room=to_room_data(reservation.room),
        check_in_date=stay_period.check_in.isoformat(),
        check_out_date=stay_period.check_out.isoformat(),
        nights=stay_period.nights(),
    )


def to_reservation_response(reservation: Reservation) -> dict:
    return ReservationResponse(data=to_reservation_data(reservation)).model_dump()


def to_search_response(result: RoomSearchResult) -> dict:
    """空室検索結果をレスポンス辞書に変換する"""
    return RoomSearchResponse(
        data=RoomSearchData(
            check_in_date=result.stay_period.check_in.isoformat(),
            check_out_date=result.stay_period.check_out.isoformat(),
            is_recommendation=result.is_recommendation,
            rooms=[to_room_data(room) for room in result.rooms],
        )
    ).model_dump()
