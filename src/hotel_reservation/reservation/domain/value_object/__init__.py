from .reservation_id import ReservationId
from .room_number import RoomNumber
from .room_price import RoomPrice
from .stay_period import StayPeriod, periods_overlap

__all__ = [
    "ReservationId",
    "RoomNumber",
    "RoomPrice",
    "StayPeriod",
    "periods_overlap",
]
