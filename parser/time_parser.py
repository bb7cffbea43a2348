"""
time_parser.py — the `settime` / `time` commands.

settime takes up to four positional arguments, always in this order:

    settime <HOUR> <DAY> <MONTH> <YEAR>

Each argument is one of:
  *        leave the field as it is
  /N       relative update: add N (may be negative) to the field
  N        absolute value; MONTH also accepts names ("dec", "December")

Arguments after the fourth are ignored. A call either applies every
field or, on the first bad argument, none of them.
"""

import re
from dataclasses import astuple

from data.months import month_code, month_name
from parser.errors import (
    InvalidBooleanFlag,
    InvalidMonthCode,
    InvalidMonthNumber,
    InvalidNumber,
    WethError,
)
from state import AppState, TimeRecord

FIELDS = ("Hour", "Day", "Month", "Year")
WILDCARD = "*"
RELATIVE_MARKER = "/"
MILITARY_FLAG = "--military="

USAGE = (
    "usage: settime <HOUR> <DAY> <MONTH> <YEAR> | settime --military=<BOOLEAN VALUE> | settime "
    "(use * to keep a field, /N to add N to it, no arguments to sync with the clock)"
)
HELP_HINT = " (for detailed usage, enter: settime --help)"

_INT_RE = re.compile(r"[+-]?[0-9]+")

# Same spellings Go's strconv.ParseBool accepts
_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}


def _parse_int(text: str) -> int | None:
    if _INT_RE.fullmatch(text):
        return int(text)
    return None


def parse_bool(text: str) -> bool:
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise InvalidBooleanFlag(text)


def _parse_month(token: str) -> int:
    number = _parse_int(token)
    if number is not None:
        if not 1 <= number <= 12:
            raise InvalidMonthNumber(number)
        return number

    code = month_code(token)
    if code is None:
        raise InvalidMonthCode(token)
    return code


# ---------------------------------------------------------------------------
# Pure parsing
# ---------------------------------------------------------------------------

def parse_time_update(tokens: list[str], current: TimeRecord) -> TimeRecord:
    """
    Apply positional tokens to *current* and return the new record.

    Raises a WethError subclass on the first bad token; *current* is never
    modified (records are immutable).
    """
    values = list(astuple(current))  # hour, day, month, year

    for i, token in enumerate(tokens[:len(FIELDS)]):
        name = FIELDS[i]

        if token == WILDCARD:
            continue

        if token.startswith(RELATIVE_MARKER):
            remainder = token[len(RELATIVE_MARKER):]
            delta = _parse_int(remainder)
            if delta is None:
                raise InvalidNumber(name, remainder)
            values[i] += delta
            continue

        if name == "Month":
            values[i] = _parse_month(token)
            continue

        number = _parse_int(token)
        if number is None:
            raise InvalidNumber(name, token)
        values[i] = number

    hour, day, month, year = values
    return TimeRecord.normalized(hour=hour, day=day, month=month, year=year)


def format_hour(hour: int, military: bool) -> str:
    if military:
        return f"{hour}:00"
    if hour > 12:
        return f"{hour - 12}PM"
    return f"{hour}AM"


def format_time(record: TimeRecord, military: bool = False) -> str:
    """'<hour>, <Month> <day>, <year>', e.g. '2PM, December 15, 2030'."""
    return (
        f"{format_hour(record.hour, military)}, "
        f"{month_name(record.month)} {record.day}, {record.year}"
    )


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def set_time(state: AppState, tokens: list[str]) -> str:
    """Handler for `settime`. Mutates *state* only on success."""
    if not tokens:
        # Explicit "now" sync: reads the injected clock
        state.time = TimeRecord.from_datetime(state.clock())
        return (
            f"set time to {state.time.to_datetime():%Y-%m-%d} "
            f"Hour: {state.time.hour}"
        )

    first = tokens[0]

    if first in ("--help", "-h"):
        return USAGE

    if first.startswith(MILITARY_FLAG):
        try:
            state.military = parse_bool(first[len(MILITARY_FLAG):])
        except InvalidBooleanFlag as e:
            return e.message + HELP_HINT
        return "military time enabled" if state.military else "military time disabled"

    try:
        updated = parse_time_update(tokens, state.time)
    except WethError as e:
        return e.message + HELP_HINT

    state.time = updated
    return f"set time to: {format_time(state.time, state.military)}"


def get_time(state: AppState, tokens: list[str]) -> str:
    """Handler for `time`."""
    return format_time(state.time, state.military)
