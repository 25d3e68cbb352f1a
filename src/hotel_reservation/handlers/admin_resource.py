from collections.abc import Iterable

from hotel_reservation.customer.applications import CustomerDirectory
from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.reservation.applications import ReservationStore
from hotel_reservation.reservation.domain.entity import Reservation, Room
from hotel_reservation.shared.utils.logger import get_logger

logger = get_logger()


class AdminResource:
    """管理者向けの窓口"""

    def __init__(self, store: ReservationStore, directory: CustomerDirectory) -> None:
        self._store = store
        self._directory = directory

    def get_customer(self, email: str) -> Customer | None:
        return self._directory.get_customer(email)

    def add_room(self, rooms: Iterable[Room]) -> None:
        logger.info("Received add room request")
        for room in rooms:
            self._store.add_room(room)

    def get_all_rooms(self) -> list[Room]:
        return self._store.get_all_rooms()

    def get_all_customers(self) -> list[Customer]:
        return self._directory.get_all_customers()

    def get_all_reservations(self) -> list[Reservation]:
        return self._store.get_all_reservations()

    def find_most_popular_room(self) -> str | None:
        return self._store.find_most_popular_room()
