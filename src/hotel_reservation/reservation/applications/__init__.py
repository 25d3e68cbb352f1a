from .reservation_store import RECOMMENDED_ROOMS_DEFAULT_PLUS_DAYS, ReservationStore

__all__ = ["RECOMMENDED_ROOMS_DEFAULT_PLUS_DAYS", "ReservationStore"]
