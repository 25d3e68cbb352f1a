from .reservation_repository import ReservationRepository
from .room_repository import RoomRepository

__all__ = ["ReservationRepository", "RoomRepository"]
