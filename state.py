"""
In-memory state for the weth REPL.

One AppState is built at startup and handed to every command handler;
nothing lives in module globals.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Callable

from parser.errors import DateOutOfRange

MIN_YEAR = 1
MAX_YEAR = 9999


@dataclass(frozen=True)
class TimeRecord:
    """The hour/day/month/year the REPL reports and mutates."""
    hour: int    # 0-23
    day: int     # 1-31
    month: int   # 1-12
    year: int

    @classmethod
    def from_datetime(cls, dt: datetime) -> "TimeRecord":
        return cls(hour=dt.hour, day=dt.day, month=dt.month, year=dt.year)

    @classmethod
    def normalized(cls, hour: int, day: int, month: int, year: int) -> "TimeRecord":
        """
        Build a record from possibly out-of-range fields by calendar carry.

        hour 25 rolls into the next day, day 0 is the last day of the
        previous month, month 14 is February of the following year.
        """
        year, month_index = divmod(year * 12 + (month - 1), 12)
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise DateOutOfRange(year)
        try:
            dt = datetime(year, month_index + 1, 1) + timedelta(days=day - 1, hours=hour)
        except OverflowError:
            raise DateOutOfRange() from None
        return cls.from_datetime(dt)

    def to_datetime(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour)


@dataclass(frozen=True)
class LocationRecord:
    """City/region/country as reported by the geolocation service."""
    country: str = ""
    region: str = ""
    city: str = ""
    timezone: str = ""   # stored, never displayed

    @classmethod
    def from_json(cls, payload: dict) -> "LocationRecord":
        """Read the lowercase ``country/region/city/timezone`` keys."""
        return cls(
            country=str(payload.get("country") or ""),
            region=str(payload.get("region") or ""),
            city=str(payload.get("city") or ""),
            timezone=str(payload.get("timezone") or ""),
        )

    @property
    def is_unknown(self) -> bool:
        return not (self.city or self.region or self.country)


@dataclass
class AppState:
    time: TimeRecord
    location: LocationRecord
    default_location: LocationRecord
    military: bool = False
    clock: Callable[[], datetime] = datetime.now

    @classmethod
    def create(
        cls,
        default_location: LocationRecord,
        clock: Callable[[], datetime] = datetime.now,
        military: bool = False,
    ) -> "AppState":
        """Fresh state: wall-clock time, current location = default."""
        return cls(
            time=TimeRecord.from_datetime(clock()),
            location=replace(default_location),
            default_location=default_location,
            military=military,
            clock=clock,
        )
