from datetime import date

from hotel_reservation.customer.applications import CustomerDirectory
from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.reservation.applications import ReservationStore
from hotel_reservation.reservation.domain.entity import Reservation, Room
from hotel_reservation.reservation.domain.enum import RoomType
from hotel_reservation.shared.utils.logger import get_logger

logger = get_logger()


class HotelResource:
    """顧客向けの窓口

    顧客の解決は CustomerDirectory、部屋と予約は ReservationStore に委譲する。
    """

    def __init__(self, store: ReservationStore, directory: CustomerDirectory) -> None:
        self._store = store
        self._directory = directory

    def get_customer(self, email: str) -> Customer | None:
        return self._directory.get_customer(email)

    def create_a_customer(self, email: str, first_name: str, last_name: str) -> Customer:
        logger.info("Received create customer request")
        return self._directory.add_customer(email, first_name, last_name)

    def get_room(self, room_number: str) -> Room | None:
        return self._store.get_room(room_number)

    def book_a_room(
        self, customer_email: str, room: Room | None, check_in: date, check_out: date
    ) -> Reservation:
        """部屋を予約する

        未登録のメールアドレスは顧客なしとして扱われ、
        InvalidArgumentException("customer") になる。
        """
        logger.info("Received book room request")
        customer = self._directory.get_customer(customer_email)
        return self._store.reserve_a_room(customer, room, check_in, check_out)

    def get_customers_reservations(self, customer_email: str) -> list[Reservation]:
        customer = self._directory.get_customer(customer_email)
        return self._store.get_customers_reservation(customer)

    def get_customer_reservation_history(self, customer_email: str) -> list[Reservation]:
        customer = self._directory.get_customer(customer_email)
        return self._store.get_customer_reservation_history(customer)

    def find_a_room(self, check_in: date, check_out: date) -> list[Room]:
        return self._store.find_rooms(check_in, check_out)

    def find_alternative_rooms(self, check_in: date, check_out: date) -> list[Room]:
        return self._store.find_alternative_rooms(check_in, check_out)

    def find_rooms_by_type(
        self, check_in: date, check_out: date, room_type: RoomType
    ) -> list[Room]:
        return self._store.get_available_rooms_by_type(check_in, check_out, room_type)

    def add_default_plus_days(self, day: date) -> date:
        return self._store.add_default_plus_days(day)

    def cancel_reservation(
        self, customer_email: str, room_number: str, check_in: date
    ) -> bool:
        logger.info("Received cancel reservation request")
        customer = self._directory.get_customer(customer_email)
        return self._store.cancel_reservation(customer, room_number, check_in)
