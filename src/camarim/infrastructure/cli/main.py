import click

from camarim.infrastructure.bootstrap import build_context
from camarim.infrastructure.cli.artist_commands import artist_menu
from camarim.infrastructure.cli.catalog_commands import catalog_menu
from camarim.infrastructure.cli.dressing_room_commands import dressing_room_menu
from camarim.infrastructure.cli.menu import MenuOption, run_menu
from camarim.infrastructure.cli.request_commands import request_menu
from camarim.infrastructure.cli.shopping_list_commands import shopping_list_menu
from camarim.infrastructure.cli.stock_commands import stock_menu
from camarim.infrastructure.log_config import configure_logging

MAIN_OPTIONS = [
    MenuOption("Item catalog", catalog_menu),
    MenuOption("Stock", stock_menu),
    MenuOption("Dressing rooms", dressing_room_menu),
    MenuOption("Artists", artist_menu),
    MenuOption("Requests", request_menu),
    MenuOption("Shopping lists", shopping_list_menu),
]


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, help="Log every change to stderr.")
@click.pass_context
def cli(click_ctx: click.Context, verbose: bool) -> None:
    """Camarim - dressing room inventory tracker"""
    configure_logging(verbose)
    if click_ctx.invoked_subcommand is None:
        click_ctx.invoke(menu)


@cli.command()
def menu() -> None:
    """Run the interactive menu (starts with everything empty)."""
    run_menu(build_context(), "Camarim", MAIN_OPTIONS, leave_label="Exit")
    click.echo("Shutting down.")
