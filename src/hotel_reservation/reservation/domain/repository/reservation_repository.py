from abc import abstractmethod

from hotel_reservation.reservation.domain.entity.reservation import Reservation
from hotel_reservation.reservation.domain.value_object.reservation_id import (
    ReservationId,
)
from hotel_reservation.shared.domain import Repository


class ReservationRepository(Repository[Reservation, ReservationId]):
    """予約台帳のインターフェース

    予約は顧客のメールアドレスごとに登録順で保持する。
    """

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """予約を顧客の予約一覧の末尾に追加する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_customer_email(self, email: str) -> list[Reservation]:
        """顧客の予約を登録順で返す"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Reservation]:
        """全顧客の予約を顧客ごとに連結して返す"""
        raise NotImplementedError

    @abstractmethod
    def remove(self, reservation: Reservation) -> None:
        """予約を台帳から取り除く"""
        raise NotImplementedError
