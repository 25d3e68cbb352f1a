from hotel_reservation.reservation.domain.entity import Room
from hotel_reservation.reservation.domain.repository import RoomRepository
from hotel_reservation.reservation.domain.value_object import RoomNumber


class InMemoryRoomRepository(RoomRepository):
    """プロセス内の dict を使用した RoomRepository の具象実装"""

    def __init__(self) -> None:
        self._rooms: dict[RoomNumber, Room] = {}

    def save(self, room: Room) -> None:
        self._rooms[room.id] = room

    def find_by_id(self, room_number: RoomNumber) -> Room | None:
        return self._rooms.get(room_number)

    def find_all(self) -> list[Room]:
        return list(self._rooms.values())

    def clear(self) -> None:
        self._rooms.clear()
