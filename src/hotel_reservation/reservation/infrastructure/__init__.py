from .in_memory_reservation_repository import InMemoryReservationRepository
from .in_memory_room_repository import InMemoryRoomRepository

__all__ = ["InMemoryReservationRepository", "InMemoryRoomRepository"]
