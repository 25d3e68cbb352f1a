from __future__ import annotations

from collections import Counter
from datetime import date, timedelta
from typing import TYPE_CHECKING

from hotel_reservation.reservation.domain.entity import Reservation, Room
from hotel_reservation.reservation.domain.enum import RoomType
from hotel_reservation.reservation.domain.factory import ReservationFactory
from hotel_reservation.reservation.domain.repository import (
    ReservationRepository,
    RoomRepository,
)
from hotel_reservation.reservation.domain.value_object import RoomNumber, StayPeriod
from hotel_reservation.shared.domain.exception import (
    InvalidArgumentException,
    ReservationConflictException,
)
from hotel_reservation.shared.utils.logger import get_logger

if TYPE_CHECKING:
    from hotel_reservation.customer.domain.entity import Customer

logger = get_logger()

# 代替日程を提案するときにずらす日数
RECOMMENDED_ROOMS_DEFAULT_PLUS_DAYS = 7


class ReservationStore:
    """部屋カタログと予約台帳を管理する

    - 同じ部屋の予約期間が重ならないことを予約時に保証する
    - 空室検索・代替日程の検索・人気の部屋の集計を行う
    """

    def __init__(
        self,
        room_repository: RoomRepository,
        reservation_repository: ReservationRepository,
        factory: ReservationFactory,
    ) -> None:
        self._rooms = room_repository
        self._reservations = reservation_repository
        self._factory = factory

    def add_room(self, room: Room) -> None:
        """部屋を登録する（同じ部屋番号は後から登録したもので置き換える）"""
        self._rooms.save(room)
        logger.info("Room saved", extra={"room_number": room.room_number})

    def get_room(self, room_number: str | None) -> Room | None:
        if room_number is None:
            return None
        try:
            key = RoomNumber(room_number)
        except ValueError:
            return None
        return self._rooms.find_by_id(key)

    def get_all_rooms(self) -> list[Room]:
        return self._rooms.find_all()

    def reserve_a_room(
        self,
        customer: Customer | None,
        room: Room | None,
        check_in: date | None,
        check_out: date | None,
    ) -> Reservation:
        """部屋を予約する

        同じ部屋に期間の重なる予約があれば ReservationConflictException を送出し、
        台帳は変更しない。
        """
        if customer is None:
            raise InvalidArgumentException("customer")
        if room is None:
            raise InvalidArgumentException("room")
        if check_in is None or check_out is None:
            raise InvalidArgumentException("dates")
        try:
            stay_period = StayPeriod(check_in=check_in, check_out=check_out)
        except ValueError as e:
            raise InvalidArgumentException("dates", str(e)) from e

        for existing in self._reservations.find_all():
            if existing.room_number == room.room_number and existing.overlaps(
                check_in, check_out
            ):
                logger.warning(
                    "Room is already booked for the selected period",
                    extra={
                        "room_number": room.room_number,
                        "check_in": check_in.isoformat(),
                        "check_out": check_out.isoformat(),
                    },
                )
                raise ReservationConflictException()

        reservation = self._factory.create(customer, room, stay_period)
        self._reservations.save(reservation)
        logger.info(
            "Reservation created",
            extra={
                "reservation_id": str(reservation.id),
                "email": customer.email,
                "room_number": room.room_number,
            },
        )
        return reservation

    def find_rooms(self, check_in: date, check_out: date) -> list[Room]:
        """期間中に予約の入っていない部屋を返す"""
        booked = {
            reservation.room_number
            for reservation in self._reservations.find_all()
            if reservation.overlaps(check_in, check_out)
        }
        return [room for room in self._rooms.find_all() if room.room_number not in booked]

    def find_alternative_rooms(self, check_in: date, check_out: date) -> list[Room]:
        """既定の日数だけずらした期間で空室を検索する"""
        return self.find_rooms(
            self.add_default_plus_days(check_in), self.add_default_plus_days(check_out)
        )

    @staticmethod
    def add_default_plus_days(day: date) -> date:
        return day + timedelta(days=RECOMMENDED_ROOMS_DEFAULT_PLUS_DAYS)

    def cancel_reservation(
        self,
        customer: Customer | None,
        room_number: str | None,
        check_in: date | None,
    ) -> bool:
        """部屋番号とチェックイン日が一致する最初の予約をキャンセルする"""
        if customer is None or room_number is None or check_in is None:
            return False

        for reservation in self._reservations.find_by_customer_email(customer.email):
            if (
                reservation.room_number == room_number
                and reservation.check_in_date == check_in
            ):
                self._reservations.remove(reservation)
                logger.info(
                    "Reservation cancelled",
                    extra={
                        "reservation_id": str(reservation.id),
                        "email": customer.email,
                        "room_number": room_number,
                    },
                )
                return True
        return False

    def get_customers_reservation(self, customer: Customer | None) -> list[Reservation]:
        if customer is None:
            return []
        return self._reservations.find_by_customer_email(customer.email)

    def find_most_popular_room(self) -> str | None:
        """予約回数が最も多い部屋番号を返す

        同数の場合は部屋番号の辞書順で最小のものを返す。
        """
        counts = Counter(
            reservation.room_number for reservation in self._reservations.find_all()
        )
        if not counts:
            return None
        room_number, _ = min(counts.items(), key=lambda item: (-item[1], item[0]))
        return room_number

    def get_available_rooms_by_type(
        self,
        check_in: date | None,
        check_out: date | None,
        room_type: RoomType | None,
    ) -> list[Room]:
        if check_in is None or check_out is None or room_type is None:
            return []
        return [
            room
            for room in self.find_rooms(check_in, check_out)
            if room.room_type == room_type
        ]

    def get_customer_reservation_history(
        self, customer: Customer | None
    ) -> list[Reservation]:
        """顧客の予約をチェックイン日の新しい順に返す"""
        return sorted(
            self.get_customers_reservation(customer),
            key=lambda reservation: reservation.check_in_date,
            reverse=True,
        )

    def get_all_reservations(self) -> list[Reservation]:
        return self._reservations.find_all()

    def reset(self) -> None:
        """部屋カタログと予約台帳を空にする"""
        self._rooms.clear()
        self._reservations.clear()
