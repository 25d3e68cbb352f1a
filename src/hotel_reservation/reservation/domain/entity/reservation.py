from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from hotel_reservation.reservation.domain.entity.room import Room
from hotel_reservation.reservation.domain.value_object import ReservationId, StayPeriod
from hotel_reservation.shared.domain import Entity

if TYPE_CHECKING:
    from hotel_reservation.customer.domain.entity import Customer


class Reservation(Entity[ReservationId]):
    """予約エンティティ

    作成後は変更されず、キャンセル時に台帳から取り除かれる。
    """

    def __init__(
        self,
        id: ReservationId,
        customer: Customer,
        room: Room,
        stay_period: StayPeriod,
    ) -> None:
        super().__init__(id)
        self._customer = customer
        self._room = room
        self._stay_period = stay_period

    @property
    def customer(self) -> Customer:
        return self._customer

    @property
    def room(self) -> Room:
        return self._room

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def room_number(self) -> str:
        return self._room.room_number

    @property
    def check_in_date(self) -> date:
        return self._stay_period.check_in

    @property
    def check_out_date(self) -> date:
        return self._stay_period.check_out

    def overlaps(self, check_in: date, check_out: date) -> bool:
        """この予約の期間が指定期間と重なるかどうか"""
        return self._stay_period.overlaps(check_in, check_out)
