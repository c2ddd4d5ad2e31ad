"""Display formatting for the free-form dates found in front matter and filenames."""

from __future__ import annotations

import re

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DATE_PARTS = 3
YEAR_LENGTH = 4
MAX_MONTH_LENGTH = 2

_FILENAME_DATE = re.compile(r"^(\d{4})-(\d{1,2})(?:-(\d{1,2}))?")


def format_date(date_str: str) -> str:
    """Format ``YYYY-MM-DD`` as ``Month D, YYYY``.

    Anything that does not split into three integers with a valid month is
    returned unchanged.

    Examples:
        >>> format_date("2025-09-02")
        'September 2, 2025'
        >>> format_date("2025-13-02")
        '2025-13-02'

    """
    parts = date_str.split("-")
    if len(parts) != DATE_PARTS:
        return date_str
    try:
        year, month, day = (int(part) for part in parts)
    except ValueError:
        return date_str
    if not 1 <= month <= len(MONTH_NAMES):
        return date_str
    return f"{MONTH_NAMES[month - 1]} {day}, {year}"


def format_month(date_str: str) -> str:
    """Format a ``YYYY-MM[-DD]`` (or ``YYYY/MM/DD``) date as ``YYYY · MM``.

    Returns the input unchanged when the year or month is not numeric.
    """
    parts = date_str.strip().replace("/", "-").split("-")
    if len(parts) >= 2:  # noqa: PLR2004
        year, month = parts[0], parts[1]
        if len(year) == YEAR_LENGTH and year.isdigit() and month.isdigit() and len(month) <= MAX_MONTH_LENGTH:
            return f"{year} · {month.zfill(2)}"
    return date_str


def date_from_filename(file_name: str) -> str | None:
    """Return the ``YYYY-MM[-DD]`` prefix of a date-prefixed file name, if any."""
    match = _FILENAME_DATE.match(file_name)
    if not match:
        return None
    return match.group(0)
