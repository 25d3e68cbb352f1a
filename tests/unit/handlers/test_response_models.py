from datetime import date
from decimal import Decimal

from hotel_reservation.handlers.response_models import (
    to_customer_data,
    to_reservation_data,
    to_room_data,
)
from hotel_reservation.reservation.domain.enum import RoomType


class TestResponseModels:
    def test_room_data(self, create_room):
        data = to_room_data(create_room("301", Decimal("200"), RoomType.SINGLE))

        assert data.model_dump() == {
            "room_number": "301",
            "price_amount": "200.00",
            "room_type": "SINGLE",
            "is_free": False,
        }
        assert str(data) == "Room Number: 301 Single bed Room Price: 200.00 per night"

    def test_free_room_data(self, create_room):
        data = to_room_data(create_room("302", Decimal("0"), RoomType.DOUBLE))

        assert data.is_free is True
        assert str(data).endswith("Room Price: Free")

    def test_customer_data(self, customer):
        assert str(to_customer_data(customer)) == (
            "First Name: John Last Name: Smith Email: john@example.com"
        )

    def test_reservation_data(self, store, create_room, customer):
        reservation = store.reserve_a_room(
            customer, create_room("301"), date(2025, 3, 1), date(2025, 3, 5)
        )

        data = to_reservation_data(reservation)

        assert data.reservation_id == str(reservation.id)
        assert data.check_in_date == "03/01/2025"
        assert data.check_out_date == "03/05/2025"
        assert data.nights == 4
        assert "Customer: John Smith" in str(data)
        assert "Check-Out Date: 03/05/2025" in str(data)
