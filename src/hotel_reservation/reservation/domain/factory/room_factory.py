from decimal import Decimal
from typing import TypedDict

from hotel_reservation.reservation.domain.entity.room import Room
from hotel_reservation.reservation.domain.enum.room_type import RoomType
from hotel_reservation.reservation.domain.value_object.room_number import RoomNumber
from hotel_reservation.reservation.domain.value_object.room_price import RoomPrice


class RoomDetails(TypedDict):
    """部屋の入力データ"""

    room_number: str
    price_amount: Decimal
    room_type: RoomType


class RoomFactory:
    """部屋エンティティを生成するFactory"""

    def create(self, room_details: RoomDetails) -> Room:
        """新しい部屋のエンティティを作成する"""
        return Room(
            id=RoomNumber(room_details["room_number"]),
            price=RoomPrice(room_details["price_amount"]),
            room_type=room_details["room_type"],
        )
