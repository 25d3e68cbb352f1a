from __future__ import annotations

from typing import TYPE_CHECKING

from hotel_reservation.reservation.domain.entity.reservation import Reservation
from hotel_reservation.reservation.domain.entity.room import Room
from hotel_reservation.reservation.domain.value_object.reservation_id import (
    ReservationId,
)
from hotel_reservation.reservation.domain.value_object.stay_period import StayPeriod

if TYPE_CHECKING:
    from hotel_reservation.customer.domain.entity import Customer


class ReservationFactory:
    """予約エンティティを生成するFactory"""

    def create(
        self, customer: Customer, room: Room, stay_period: StayPeriod
    ) -> Reservation:
        """新規予約のエンティティを作成する"""
        return Reservation(
            id=ReservationId.generate(),
            customer=customer,
            room=room,
            stay_period=stay_period,
        )
