from __future__ import annotations

from datetime import date

import click
from pydantic import ValidationError

from hotel_reservation.console.admin_menu import AdminMenu
from hotel_reservation.console.prompts import ask, ask_date, ask_yes_no
from hotel_reservation.handlers import HotelResource
from hotel_reservation.handlers.request_models import CreateCustomerRequest, StayRequest
from hotel_reservation.handlers.response_models import to_reservation_data, to_room_data
from hotel_reservation.reservation.domain.entity import Room
from hotel_reservation.shared.config import DATE_FORMAT
from hotel_reservation.shared.domain.exception import (
    DomainException,
    DuplicateResourceException,
)

MAIN_MENU = """
Welcome to the Hotel Reservation Application
--------------------------------------------
1. Find and reserve a room
2. See my reservations
3. Create an Account
4. Admin
5. Exit
--------------------------------------------
Please select a number for the menu option:"""


class MainMenu:
    """顧客向けメインメニュー"""

    def __init__(self, hotel_resource: HotelResource, admin_menu: AdminMenu) -> None:
        self._hotel_resource = hotel_resource
        self._admin_menu = admin_menu

    def run(self) -> None:
        self.print_menu()
        try:
            while True:
                line = ask("")
                if not line:
                    click.echo("Empty input received. Exiting program...")
                    return
                if len(line) != 1:
                    click.echo("Error: Invalid action\n")
                    continue
                if line == "1":
                    self.find_and_reserve_room()
                elif line == "2":
                    self.see_my_reservations()
                elif line == "3":
                    self.create_account()
                elif line == "4":
                    self._admin_menu.run()
                    self.print_menu()
                elif line == "5":
                    click.echo("Exit")
                    return
                else:
                    click.echo("Unknown action\n")
        except click.Abort:
            click.echo("Empty input received. Exiting program...")

    def print_menu(self) -> None:
        click.echo(MAIN_MENU)

    def find_and_reserve_room(self) -> None:
        check_in = ask_date("Enter Check-In Date mm/dd/yyyy example 02/01/2020")
        check_out = ask_date("Enter Check-Out Date mm/dd/yyyy example 02/21/2020")
        try:
            stay = StayRequest(check_in_date=check_in, check_out_date=check_out)
        except ValidationError:
            click.echo("Error: Check-in date must precede check-out date.")
            self.print_menu()
            return

        rooms = self._hotel_resource.find_a_room(stay.check_in_date, stay.check_out_date)
        if rooms:
            self._print_rooms(rooms)
            self.reserve_room(stay.check_in_date, stay.check_out_date, rooms)
            return

        alternative_rooms = self._hotel_resource.find_alternative_rooms(
            stay.check_in_date, stay.check_out_date
        )
        if not alternative_rooms:
            click.echo("No rooms found.")
            self.print_menu()
            return

        alternative_check_in = self._hotel_resource.add_default_plus_days(
            stay.check_in_date
        )
        alternative_check_out = self._hotel_resource.add_default_plus_days(
            stay.check_out_date
        )
        click.echo(
            "We've only found rooms on alternative dates:"
            f"\nCheck-In Date: {alternative_check_in.strftime(DATE_FORMAT)}"
            f"\nCheck-Out Date: {alternative_check_out.strftime(DATE_FORMAT)}"
        )
        self._print_rooms(alternative_rooms)
        self.reserve_room(alternative_check_in, alternative_check_out, alternative_rooms)

    def reserve_room(self, check_in: date, check_out: date, rooms: list[Room]) -> None:
        """表示した部屋の中から1室を予約する"""
        if not ask_yes_no(
            "Would you like to book? (y/n)", "Invalid input. Please enter 'y' or 'n'."
        ):
            click.echo("Booking cancelled.")
        elif not ask_yes_no(
            "Do you have an account with us? (y/n)",
            "Invalid input. Expected 'y' or 'n'.",
        ):
            click.echo("Please, create an account.")
        else:
            self._book(check_in, check_out, rooms)
        self.print_menu()

    def _book(self, check_in: date, check_out: date, rooms: list[Room]) -> None:
        customer_email = ask("Enter Email format: name@domain.com")
        if self._hotel_resource.get_customer(customer_email) is None:
            click.echo("Customer not found. You may need to create a new account.")
            return

        room_number = ask("What room number would you like to reserve?").strip()
        if all(room.room_number != room_number for room in rooms):
            click.echo("Error: room number not available. Start reservation again.")
            return

        room = self._hotel_resource.get_room(room_number)
        try:
            reservation = self._hotel_resource.book_a_room(
                customer_email, room, check_in, check_out
            )
        except DomainException as e:
            click.echo(f"Error: {e}")
            return
        click.echo("Reservation created successfully!")
        click.echo(str(to_reservation_data(reservation)))

    def see_my_reservations(self) -> None:
        customer_email = ask("Enter your Email format: name@domain.com")
        reservations = self._hotel_resource.get_customer_reservation_history(
            customer_email
        )
        if not reservations:
            click.echo("No reservations found.")
            self.print_menu()
            return

        for reservation in reservations:
            click.echo("\n" + str(to_reservation_data(reservation)))
        while ask_yes_no(
            "Would you like to cancel a reservation? (y/n)",
            "Invalid input. Please enter 'y' or 'n'.",
        ):
            self.cancel_reservation(customer_email)
        click.echo("No cancellation performed.")
        self.print_menu()

    def cancel_reservation(self, customer_email: str) -> None:
        room_number = ask(
            "Enter the ROOM NUMBER of the reservation you want to cancel:"
        ).strip()
        check_in = ask_date(
            "Enter the CHECK-IN DATE (mm/dd/yyyy) of the reservation to cancel:"
        )
        if self._hotel_resource.cancel_reservation(customer_email, room_number, check_in):
            click.echo(f"Reservation for room {room_number} cancelled successfully.")
        else:
            click.echo(
                "Error: Reservation not found or unable to cancel. "
                "Check room number and date."
            )

    def create_account(self) -> None:
        try:
            request = CreateCustomerRequest(
                email=ask("Enter Email format: name@domain.com"),
                first_name=ask("First Name:"),
                last_name=ask("Last Name:"),
            )
        except ValidationError as e:
            click.echo(f"Error: {e.errors()[0]['loc'][0]} cannot be empty.")
            self.print_menu()
            return

        try:
            self._hotel_resource.create_a_customer(
                request.email, request.first_name, request.last_name
            )
        except (ValueError, DuplicateResourceException) as e:
            click.echo(str(e))
            self.print_menu()
            return
        click.echo("Account created successfully!")
        self.print_menu()

    def _print_rooms(self, rooms: list[Room]) -> None:
        for room in rooms:
            click.echo(str(to_room_data(room)))
