from hotel_reservation.reservation.domain.enum import RoomType
from hotel_reservation.reservation.domain.value_object import RoomNumber, RoomPrice
from hotel_reservation.shared.domain import Entity


class Room(Entity[RoomNumber]):
    """部屋エンティティ

    登録後は変更されない。同じ部屋番号で再登録すると置き換えられる。
    """

    def __init__(self, id: RoomNumber, price: RoomPrice, room_type: RoomType) -> None:
        super().__init__(id)
        self._price = price
        self._room_type = room_type

    @property
    def room_number(self) -> str:
        return str(self.id)

    @property
    def price(self) -> RoomPrice:
        return self._price

    @property
    def room_type(self) -> RoomType:
        return self._room_type

    def is_free(self) -> bool:
        return self._price.is_free()
