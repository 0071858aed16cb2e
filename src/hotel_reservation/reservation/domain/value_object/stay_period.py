from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from hotel_reservation.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(チェックイン日 + チェックアウト日)

    チェックイン日はチェックアウト日より前でなければならない。
    """

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        if not isinstance(self.check_in, date) or not isinstance(self.check_out, date):
            raise ValidationException("Check-in and check-out must be dates")
        if self.check_out <= self.check_in:
            raise ValidationException("Check-out date must be after check-in date")

    @classmethod
    def from_iso(cls, check_in: str, check_out: str) -> StayPeriod:
        """YYYY-MM-DD 形式の文字列から生成"""
        try:
            check_in_date = date.fromisoformat(check_in)
            check_out_date = date.fromisoformat(check_out)
        except (TypeError, ValueError) as e:
            raise ValidationException(f"Invalid date format: {e}") from e
        return cls(check_in=check_in_date, check_out=check_out_date)

    def __str__(self) -> str:
        return f"{self.check_in.isoformat()} - {self.check_out.isoformat()}"

    def nights(self) -> int:
        """宿泊数を計算する"""
        return (self.check_out - self.check_in).days

    def overlaps(self, other: StayPeriod) -> bool:
        """他の期間と重なるかどうか

        端点が一致する場合（片方のチェックアウト日 = もう片方のチェックイン日）も
        重なりとみなす。
        """
        return self.check_in <= other.check_out and self.check_out >= other.check_in

    def shift(self, days: int) -> StayPeriod:
        """宿泊数を保ったまま期間を前後にずらす"""
        delta = timedelta(days=days)
        return StayPeriod(check_in=self.check_in + delta, check_out=self.check_out + delta)
