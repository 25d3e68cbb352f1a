from datetime import date

import click
from pydantic import ValidationError

from hotel_reservation.handlers.request_models import DateInput


def ask(text: str) -> str:
    """1行入力を読む（入力が尽きた場合は click.Abort）"""
    return click.prompt(
        text,
        default="",
        show_default=False,
        prompt_suffix="\n" if text else "",
    )


def ask_date(text: str) -> date:
    """正しい日付が入力されるまで聞き直す"""
    while True:
        try:
            return DateInput(value=ask(text)).value
        except ValidationError:
            click.echo("Error: Invalid date.")


def ask_yes_no(text: str, invalid_message: str) -> bool:
    while True:
        answer = ask(text).strip().lower()
        if answer == "y":
            return True
        if answer == "n":
            return False
        click.echo(invalid_message)
