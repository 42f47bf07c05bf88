"""Menu loop and input helpers shared by every submenu."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Callable

import click

from camarim.domain.exceptions import DomainException
from camarim.infrastructure.bootstrap import AppContext

MenuAction = Callable[[AppContext], None]


@dataclass(frozen=True)
class MenuOption:
    label: str
    action: MenuAction


def run_menu(
    ctx: AppContext,
    title: str,
    options: list[MenuOption],
    leave_label: str = "Back",
) -> None:
    """Show *options* until the user picks 0.

    Domain errors raised by an action are reported and the loop resumes.
    """
    while True:
        click.echo()
        click.echo(f"=== {title} ===")
        for number, option in enumerate(options, start=1):
            click.echo(f"{number}. {option.label}")
        click.echo(f"0. {leave_label}")

        choice = click.prompt("Option", type=click.IntRange(0, len(options)))
        if choice == 0:
            return

        try:
            options[choice - 1].action(ctx)
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)


# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------


def prompt_id(text: str) -> int:
    return click.prompt(text, type=int)


def prompt_quantity(text: str = "Quantity") -> int:
    return click.prompt(text, type=int)


def prompt_text(text: str) -> str:
    return click.prompt(text, type=str)


def parse_price(raw: str) -> Decimal:
    """Parse a price typed with either '.' or ',' as decimal separator.

    Anything that is not a finite number becomes 0.00.
    """
    try:
        value = Decimal(raw.strip().replace(",", "."))
    except InvalidOperation:
        return Decimal("0.00")
    if not value.is_finite():
        return Decimal("0.00")
    return value


def prompt_price(text: str = "Unit price") -> Decimal:
    return parse_price(click.prompt(text, type=str))


def ok(message: str) -> None:
    click.echo(f"[OK] {message}")
