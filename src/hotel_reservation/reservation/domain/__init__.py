from .entity import Reservation, Room
from .enum import RoomType
from .factory import ReservationFactory, RoomDetails, RoomFactory
from .repository import ReservationRepository, RoomRepository
from .value_object import ReservationId, RoomNumber, RoomPrice, StayPeriod

__all__ = [
    "Reservation",
    "Room",
    "RoomType",
    "ReservationFactory",
    "RoomDetails",
    "RoomFactory",
    "ReservationRepository",
    "RoomRepository",
    "ReservationId",
    "RoomNumber",
    "RoomPrice",
    "StayPeriod",
]
