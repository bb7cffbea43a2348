"""
Error taxonomy for weth.

Every error carries a single human-readable line in ``message`` so the
REPL can print it as-is. Parsing errors are raised by the pure parsers and
caught by the command handlers; resolver errors are never raised out of
``resolve_location`` but stored on the returned ``LocationLookup``.
"""


class WethError(Exception):
    """Base class for all weth errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class InvalidNumber(WethError):
    def __init__(self, field: str, raw_token: str):
        self.field = field
        self.raw_token = raw_token
        super().__init__(f"Error: Expected a number for {field}, got {raw_token}")


class InvalidMonthNumber(WethError):
    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Error: Expected Month number in range 1-12, got {value}")


class InvalidMonthCode(WethError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Error: Expected a valid month code, got {token}")


class InvalidBooleanFlag(WethError):
    def __init__(self, raw_token: str):
        self.raw_token = raw_token
        super().__init__(f"usage: settime --military=<BOOLEAN VALUE> (got '{raw_token}')")


class DateOutOfRange(WethError):
    """The fields parsed fine but do not land on a representable date.

    *year* is set when the year itself is outside 1-9999; it is None when a
    valid year is pushed out of range by the day or hour carry.
    """

    def __init__(self, year: int | None = None):
        self.year = year
        if year is None:
            msg = "Error: Day/Hour carries the date outside years 1-9999"
        else:
            msg = f"Error: Year {year} is out of range 1-9999"
        super().__init__(msg)


# ---------------------------------------------------------------------------
# Location resolver
# ---------------------------------------------------------------------------

class ResolverTransportFailure(WethError):
    def __init__(self, stage: str, detail: str = ""):
        self.stage = stage  # "ip" | "geolocation"
        self.detail = detail
        msg = f"location resolver unavailable ({stage} lookup failed)"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class ResolverDecodeFailure(WethError):
    def __init__(self, detail: str = ""):
        self.detail = detail
        msg = "location resolver returned an unreadable response"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
