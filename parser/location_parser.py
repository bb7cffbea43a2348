"""
location_parser.py — the `setloc` / `loc` commands.

    setloc <CITY> <REGION> <COUNTRY>

"*" keeps a field, anything else replaces it verbatim (place names are
not checked against anything). With no arguments the location goes back
to the default found at startup.
"""

from dataclasses import replace

from state import AppState, LocationRecord

FIELDS = ("city", "region", "country")
WILDCARD = "*"


def parse_location_update(tokens: list[str], current: LocationRecord) -> LocationRecord:
    """Return *current* with the positional tokens applied."""
    changes = {
        name: token
        for name, token in zip(FIELDS, tokens)
        if token != WILDCARD
    }
    return replace(current, **changes)


def format_location(record: LocationRecord) -> str:
    return f"Location: {record.city} {record.region}, {record.country}"


def set_location(state: AppState, tokens: list[str]) -> str:
    """Handler for `setloc`."""
    if not tokens:
        state.location = replace(state.default_location)
    else:
        state.location = parse_location_update(tokens, state.location)
    return format_location(state.location)


def get_location(state: AppState, tokens: list[str]) -> str:
    """Handler for `loc`."""
    return format_location(state.location)
