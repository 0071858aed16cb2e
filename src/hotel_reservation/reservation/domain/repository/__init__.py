from .reservation_repository import ReservationRepository

__all__ = ["ReservationRepository"]
