from abc import abstractmethod

from hotel_reservation.reservation.domain.entity.room import Room
from hotel_reservation.reservation.domain.value_object.room_number import RoomNumber
from hotel_reservation.shared.domain import Repository


class RoomRepository(Repository[Room, RoomNumber]):
    """部屋カタログのインターフェース"""

    @abstractmethod
    def save(self, room: Room) -> None:
        """部屋を登録する（同じ部屋番号があれば置き換える）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, room_number: RoomNumber) -> Room | None:
        """部屋番号で検索する"""
        raise NotImplementedError
