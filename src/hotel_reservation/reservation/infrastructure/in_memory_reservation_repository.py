from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.repository import ReservationRepository
from hotel_reservation.reservation.domain.value_object import ReservationId


class InMemoryReservationRepository(ReservationRepository):
    """プロセス内の dict を使用した ReservationRepository の具象実装

    キーは顧客のメールアドレス、値はその顧客の予約リスト（登録順）。
    """

    def __init__(self) -> None:
        self._reservations_by_customer: dict[str, list[Reservation]] = {}

    def save(self, reservation: Reservation) -> None:
        self._reservations_by_customer.setdefault(
            reservation.customer.email, []
        ).append(reservation)

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        for reservation in self.find_all():
            if reservation.id == reservation_id:
                return reservation
        return None

    def find_by_customer_email(self, email: str) -> list[Reservation]:
        return list(self._reservations_by_customer.get(email, []))

    def find_all(self) -> list[Reservation]:
        return [
            reservation
            for reservations in self._reservations_by_customer.values()
            for reservation in reservations
        ]

    def remove(self, reservation: Reservation) -> None:
        reservations = self._reservations_by_customer.get(reservation.customer.email)
        if reservations is None or reservation not in reservations:
            return
        reservations.remove(reservation)

    def clear(self) -> None:
        self._reservations_by_customer.clear()
