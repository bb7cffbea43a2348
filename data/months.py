"""
Month-code table.

Static two-way mapping between month names and their 1-12 numbers.
Lookups are case-insensitive and accept full names plus the common
three-letter abbreviations (May has none, its name is already short).
"""

MONTH_CODES = {
    "january": 1, "february": 2, "march": 3, "april": 4,
    "may": 5, "june": 6, "july": 7, "august": 8,
    "september": 9, "october": 10, "november": 11, "december": 12,
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "jun": 6, "jul": 7,
    "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

MONTH_NAMES = {
    1: "January", 2: "February", 3: "March", 4: "April",
    5: "May", 6: "June", 7: "July", 8: "August",
    9: "September", 10: "October", 11: "November", 12: "December",
}


def month_code(token: str) -> int | None:
    """Return the 1-12 number for a month name/abbreviation, or None."""
    return MONTH_CODES.get(token.lower())


def month_name(number: int) -> str:
    """Display name for a month number (1-12)."""
    return MONTH_NAMES[number]
