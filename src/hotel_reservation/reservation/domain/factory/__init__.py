from .reservation_factory import ReservationFactory
from .room_factory import RoomDetails, RoomFactory

__all__ = ["ReservationFactory", "RoomDetails", "RoomFactory"]
