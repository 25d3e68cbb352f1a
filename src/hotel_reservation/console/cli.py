"""CLI entry point for hotel-reservation."""

import click

from hotel_reservation import __version__
from hotel_reservation.console.admin_menu import AdminMenu
from hotel_reservation.console.bootstrap import build_resources
from hotel_reservation.console.main_menu import MainMenu


@click.command()
@click.version_option(version=__version__)
def main() -> None:
    """Hotel Reservation - console hotel booking application.

    Rooms, customers and reservations live in memory for the
    duration of the session.
    """
    hotel_resource, admin_resource = build_resources()
    MainMenu(hotel_resource, AdminMenu(admin_resource)).run()


if __name__ == "__main__":
    main()
