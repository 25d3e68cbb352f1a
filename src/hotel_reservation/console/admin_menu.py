from decimal import Decimal

import click
from pydantic import ValidationError

from hotel_reservation.console.prompts import ask
from hotel_reservation.handlers import AdminResource
from hotel_reservation.handlers.request_models import AddRoomRequest
from hotel_reservation.handlers.response_models import (
    to_customer_data,
    to_reservation_data,
    to_room_data,
)
from hotel_reservation.reservation.domain.enum import RoomType
from hotel_reservation.reservation.domain.factory import RoomFactory
from hotel_reservation.shared.utils.validators import to_decimal

ADMIN_MENU = """Admin Menu
1. Display all customers
2. Display all rooms
3. Display all reservations
4. Add a room
5. Find most popular room
6. Back to main menu"""


def _room_number(value: str) -> str:
    if not value.strip():
        raise click.BadParameter("Room number cannot be empty.")
    return value.strip()


def _room_price(value: str) -> Decimal:
    try:
        price = to_decimal(value)
    except ValueError as e:
        raise click.BadParameter(
            "Invalid room price! Please, enter a valid decimal number. "
            "Decimals should be separated by point (.)"
        ) from e
    if price < 0:
        raise click.BadParameter("Invalid room price! Price cannot be negative.")
    return price


class AdminMenu:
    """管理者メニュー"""

    def __init__(
        self, admin_resource: AdminResource, factory: RoomFactory | None = None
    ) -> None:
        self._admin_resource = admin_resource
        self._factory = factory or RoomFactory()

    def run(self) -> None:
        """管理者メニューを表示し、6 が選ばれるまで操作を受け付ける

        入力が尽きた場合の click.Abort は呼び出し元で処理する。
        """
        self.print_menu()
        while True:
            line = ask("")
            if len(line) != 1:
                click.echo("Error: Invalid action\n")
                continue
            if line == "1":
                self.display_all_customers()
            elif line == "2":
                self.display_all_rooms()
            elif line == "3":
                self.display_all_reservations()
            elif line == "4":
                self.add_room()
            elif line == "5":
                self.find_most_popular_room()
            elif line == "6":
                return
            else:
                click.echo("Unknown action\n")

    def print_menu(self) -> None:
        click.echo(ADMIN_MENU)

    def add_room(self) -> None:
        while True:
            try:
                request = AddRoomRequest(
                    room_number=click.prompt(
                        "Enter room number", value_proc=_room_number
                    ),
                    price_amount=click.prompt(
                        "Enter price per night", value_proc=_room_price
                    ),
                    room_type=click.prompt(
                        "Enter room type: 1 for single bed, 2 for double bed",
                        type=click.Choice([t.label for t in RoomType]),
                    ),
                )
            except ValidationError as e:
                click.echo(f"Error: {e.errors()[0]['msg']}")
                continue
            room = self._factory.create(
                {
                    "room_number": request.room_number,
                    "price_amount": request.price_amount,
                    "room_type": request.room_type,
                }
            )
            self._admin_resource.add_room([room])
            click.echo("Room added successfully!")

            if not self._add_another_room():
                break
        self.print_menu()

    def _add_another_room(self) -> bool:
        answer = ask("Would like to add another room? Y/N").strip().upper()
        while answer not in ("Y", "N"):
            answer = ask("Please enter Y (Yes) or N (No)").strip().upper()
        return answer == "Y"

    def display_all_customers(self) -> None:
        customers = self._admin_resource.get_all_customers()
        if not customers:
            click.echo("No customers found.")
            return
        for customer in customers:
            click.echo(str(to_customer_data(customer)))

    def display_all_rooms(self) -> None:
        rooms = self._admin_resource.get_all_rooms()
        if not rooms:
            click.echo("No rooms found.")
            return
        for room in rooms:
            click.echo(str(to_room_data(room)))

    def display_all_reservations(self) -> None:
        reservations = self._admin_resource.get_all_reservations()
        if not reservations:
            click.echo("No reservations found.")
            return
        for reservation in reservations:
            click.echo(str(to_reservation_data(reservation)) + "\n")

    def find_most_popular_room(self) -> None:
        popular_room = self._admin_resource.find_most_popular_room()
        if popular_room is None:
            click.echo("No reservations found to determine the most popular room.")
        else:
            click.echo(f"The most popular room is: {popular_room}")
