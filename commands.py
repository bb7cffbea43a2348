"""
Command dispatcher — maps the first word of a REPL line to a handler.

  dispatch(line, state)
  → Splits the line on spaces, looks up the first token in COMMANDS and
    calls the handler with the remaining tokens.
  → Returns the text to print, or None for a blank line.

Every handler has the signature handler(state, tokens) -> str.
"""

from typing import Callable

import config
from parser.location_parser import get_location, set_location
from parser.time_parser import get_time, set_time
from state import AppState

Handler = Callable[[AppState, list[str]], str]

EXIT_COMMANDS = {"quit", "exit"}

HELP_TEXT = (
    "weth keeps a current TIME and LOCATION in memory. "
    "Commands: "
    "time (show the time) | "
    "settime <HOUR> <DAY> <MONTH> <YEAR> (change it; * keeps a field, /N adds N, "
    "no arguments syncs with the clock, --military=<BOOL> switches 24-hour display) | "
    "loc (show the location) | "
    "setloc <CITY> <REGION> <COUNTRY> (change it; * keeps a field, "
    "no arguments restores the detected location) | "
    "help | quit"
)


def show_help(state: AppState, tokens: list[str]) -> str:
    return HELP_TEXT


COMMANDS: dict[str, Handler] = {
    "settime": set_time,
    "time": get_time,
    "setloc": set_location,
    "loc": get_location,
    "help": show_help,
}


def is_exit_command(text: str) -> bool:
    return text.strip().lower() in EXIT_COMMANDS


def split_command(line: str) -> list[str]:
    """
    Trim the line and split on single spaces.

    No quoting: "setloc New York" is three tokens, and doubled spaces give
    empty tokens, which then fail validation like any other bad value.
    """
    line = line.strip(" \r\n")
    if not line:
        return []
    return line.split(" ")


def dispatch(line: str, state: AppState) -> str | None:
    """Run one REPL line against *state* and return the reply text."""
    arguments = split_command(line)
    if not arguments:
        return None

    name, tokens = arguments[0], arguments[1:]
    handler = COMMANDS.get(name)
    if handler is None:
        return f"{name}: command not found"

    output = handler(state, tokens)
    if config.DEBUG:
        print(f"[DISPATCH] {name} {tokens} → {output!r}")
    return output
