from abc import ABC, abstractmethod

from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.value_object import StayPeriod
from hotel_reservation.room.domain.entity import Room
from hotel_reservation.room.domain.value_object import RoomNumber


class ReservationRepository(ABC):
    """予約ストアのインターフェース

    追加のみ可能（更新・削除は持たない）。予約は独自のIDを持たないため
    ID 検索も持たない。
    """

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """空室を再確認したうえで予約を追加する

        確認と追加は他の予約と割り込まれない単位で行う。

        Raises:
            RoomUnavailableException: 期間が重なる予約が既に存在する場合
        """
        raise NotImplementedError

    @abstractmethod
    def is_available(self, room: Room, stay_period: StayPeriod) -> bool:
        """客室が指定期間に予約可能かどうか"""
        raise NotImplementedError

    @abstractmethod
    def find_by_room(self, room_number: RoomNumber) -> list[Reservation]:
        """客室の予約を取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_customer(self, customer: Customer) -> list[Reservation]:
        """顧客の予約を取得する（該当なしは空リスト）"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Reservation]:
        """全予約を登録順に取得する"""
        raise NotImplementedError
