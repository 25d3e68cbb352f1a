from __future__ import annotations

from pydantic import BaseModel

from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.reservation.domain.entity import Reservation, Room
from hotel_reservation.shared.config import DATE_FORMAT


class RoomData(BaseModel):
    """部屋の表示モデル"""

    room_number: str
    price_amount: str
    room_type: str
    is_free: bool

    def __str__(self) -> str:
        price = "Free" if self.is_free else f"{self.price_amount} per night"
        return (
            f"Room Number: {self.room_number} "
            f"{self.room_type.capitalize()} bed Room Price: {price}"
        )


class CustomerData(BaseModel):
    """顧客の表示モデル"""

    email: str
    first_name: str
    last_name: str

    def __str__(self) -> str:
        return f"First Name: {self.first_name} Last Name: {self.last_name} Email: {self.email}"


class ReservationData(BaseModel):
    """予約の表示モデル"""

    reservation_id: str
    customer: CustomerData
    room: RoomData
    check_in_date: str
    check_out_date: str
    nights: int

    def __str__(self) -> str:
        return (
            f"Customer: {self.customer.first_name} {self.customer.last_name}\n"
            f"{self.room}\n"
            f"Check-In Date: {self.check_in_date}\n"
            f"Check-Out Date: {self.check_out_date}"
        )


def to_room_data(room: Room) -> RoomData:
    """Room エンティティを表示モデルに変換する"""
    return RoomData(
        room_number=room.room_number,
        price_amount=str(room.price),
        room_type=room.room_type.value,
        is_free=room.is_free(),
    )


def to_customer_data(customer: Customer) -> CustomerData:
    return CustomerData(
        email=customer.email,
        first_name=customer.first_name,
        last_name=customer.last_name,
    )


def to_reservation_data(reservation: Reservation) -> ReservationData:
    """Reservation エンティティを表示モデルに変換する"""
    return ReservationData(
        reservation_id=str(reservation.id),
        customer=to_customer_data(reservation.customer),
        room=to_room_data(reservation.room),
        check_in_date=reservation.check_in_date.strftime(DATE_FORMAT),
        check_out_date=reservation.check_out_date.strftime(DATE_FORMAT),
        nights=reservation.stay_period.nights(),
    )
