from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.customer.domain.value_object import EmailAddress
from hotel_reservation.reservation.applications import ReservationStore
from hotel_reservation.reservation.domain.entity import Room
from hotel_reservation.reservation.domain.enum import RoomType
from hotel_reservation.reservation.domain.factory import ReservationFactory
from hotel_reservation.reservation.domain.value_object import RoomNumber, RoomPrice
from hotel_reservation.reservation.infrastructure import (
    InMemoryReservationRepository,
    InMemoryRoomRepository,
)


@pytest.fixture
def create_room():
    """Room を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        room_number: str = "101",
        price_amount: Decimal = Decimal("100.0"),
        room_type: RoomType = RoomType.SINGLE,
    ) -> Room:
        return Room(
            id=RoomNumber(room_number),
            price=RoomPrice(price_amount),
            room_type=room_type,
        )

    return _factory


@pytest.fixture
def create_customer():
    """Customer を生成する Factory fixture"""

    def _factory(
        email: str = "john@example.com",
        first_name: str = "John",
        last_name: str = "Smith",
    ) -> Customer:
        return Customer(
            id=EmailAddress(email), first_name=first_name, last_name=last_name
        )

    return _factory


@pytest.fixture
def customer(create_customer):
    return create_customer()


@pytest.fixture
def store():
    """テストごとに新しい ReservationStore"""
    return ReservationStore(
        room_repository=InMemoryRoomRepository(),
        reservation_repository=InMemoryReservationRepository(),
        factory=ReservationFactory(),
    )


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def jan():
    """2025年1月の日付を返すヘルパー"""

    def _day(day: int) -> date:
        return date(2025, 1, day)

    return _day
