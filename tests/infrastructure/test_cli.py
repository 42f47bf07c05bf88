"""End-to-end tests for the interactive menu, driven through click's CliRunner."""

import logging

import pytest
from click.testing import CliRunner

from camarim.infrastructure.cli.main import cli
from camarim.infrastructure.log_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def _run(*lines: str):
    return CliRunner().invoke(cli, ["menu"], input="\n".join(lines) + "\n")


class TestMenuNavigation:

    def test_exit_immediately(self):
        result = _run("0")
        assert result.exit_code == 0
        assert "1. Item catalog" in result.output
        assert "Shutting down." in result.output

    def test_default_command_is_menu(self):
        result = CliRunner().invoke(cli, [], input="0\n")
        assert result.exit_code == 0
        assert "=== Camarim ===" in result.output


class TestCatalogFlow:

    def test_register_with_comma_price_and_show(self):
        result = _run(
            "1",                 # catalog
            "2", "Chair", "10,50",  # register
            "1",                 # show
            "0", "0",
        )
        assert result.exit_code == 0
        assert "[OK] Item registered with ID 1" in result.output
        assert "R$ 10.50" in result.output

    def test_duplicate_name_reported_and_loop_continues(self):
        result = _run(
            "1",
            "2", "Chair", "10",
            "2", "Chair", "20",
            "0", "0",
        )
        assert result.exit_code == 0
        assert "Error: An item named 'Chair' already exists" in result.output
        assert "Shutting down." in result.output


class TestStockFlow:

    def test_receive_and_issue_too_much(self):
        result = _run(
            "1", "2", "Rope", "5", "0",  # catalog: register Rope
            "2",                         # stock
            "2", "1", "5",               # receive 5 x item 1
            "3", "1", "6",               # issue 6
            "5", "1",                    # quantity on hand
            "0", "0",
        )
        assert result.exit_code == 0
        assert "Insufficient quantity of Rope in stock" in result.output
        assert "Quantity on hand: 5" in result.output


class TestRequestFlow:

    def test_fulfilled_request_rejects_new_items(self):
        result = _run(
            "1", "2", "Water", "2", "0",  # catalog: register Water
            "5",                          # requests
            "2", "1", "Gal",              # create request for room 1
            "4", "1", "1", "2",           # add 2 x Water
            "6", "1",                     # mark fulfilled
            "4", "1", "1", "1",           # add again -> error
            "1",                          # show
            "0", "0",
        )
        assert result.exit_code == 0
        assert "already fulfilled" in result.output
        assert "Status: FULFILLED" in result.output


class TestAssignmentFlow:

    def test_assign_artist_updates_both_sides(self):
        result = _run(
            "4", "2", "Gal", "0", "0",         # artists: register Gal
            "3", "2", "Camarim A", "0",        # rooms: register
            "8", "1", "1",                     # assign artist 1 to room 1
            "1",                               # show rooms
            "0",
            "4", "1", "0",                     # artists: show
            "0",
        )
        assert result.exit_code == 0
        assert "Artist ID: 1" in result.output
        assert "Artista [ID: 1, Nome: Gal, Camarim ID: 1]" in result.output

    def test_release_artist_from_room_menu(self):
        result = _run(
            "4", "2", "Gal", "0", "0",         # artists: register Gal
            "3", "2", "Camarim A", "0",        # rooms: register
            "8", "1", "1",                     # assign artist 1 to room 1
            "9", "1",                          # release room 1
            "1",                               # show rooms
            "0",
            "4", "1", "0",                     # artists: show
            "0",
        )
        assert result.exit_code == 0
        assert "[OK] Dressing room #1 released" in result.output
        assert "Artist ID: 0" in result.output
        assert "Artista [ID: 1, Nome: Gal, Camarim ID: 0]" in result.output

    def test_removing_artist_frees_their_room(self):
        result = _run(
            "4", "2", "Gal", "0", "0",         # artists: register Gal
            "3", "2", "Camarim A", "0",        # rooms: register
            "8", "1", "1",                     # assign artist 1 to room 1
            "0",
            "4", "3", "1", "0",                # artists: remove Gal
            "3", "1", "0",                     # rooms: show
            "0",
        )
        assert result.exit_code == 0
        assert "Artist ID: 0" in result.output


class TestShoppingListFlow:

    def test_rename_list(self):
        result = _run(
            "6",                               # shopping lists
            "2", "Props",                      # create
            "9", "1", "Costumes",              # rename
            "1",                               # show
            "0", "0",
        )
        assert result.exit_code == 0
        assert "[OK] Shopping list #1 renamed" in result.output
        assert "Description: Costumes" in result.output
