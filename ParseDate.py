""" Christopher Mee
2026-10-17
Parse a loosely-typed date value and convert it into the "DD MMM YYYY" format.
"""

import datetime
import sys
from typing import Any

from dateutil import parser as dateParser

# MONTHS ======================================================================
MONTH_ABR = (  # English, independent of locale
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
# =============================================================================

# SETTINGS ====================================================================
# advanced
EPOCH_UNIT = 1000  # numeric dates are milliseconds since the epoch
# =============================================================================


def parseEpoch(epoch: int | float) -> datetime.date:
    """Parse epoch milliseconds.

    Args:
        epoch (int | float): Milliseconds since 1970-01-01 UTC.

    Raises:
        ValueError: Epoch out of range.

    Returns:
        datetime.date: Parsed date (UTC).
    """
    try:
        return datetime.datetime.fromtimestamp(
            epoch / EPOCH_UNIT, tz=datetime.timezone.utc
        ).date()
    except (OverflowError, OSError, ValueError) as e:
        raise ValueError(f"Invalid epoch value: {epoch!r}.") from e


def parseDate(date: Any) -> datetime.date:
    """Parse date.

    Args:
        date (Any): ISO-8601 string, epoch milliseconds, or date object.

    Raises:
        ValueError: Date cannot be parsed.

    Returns:
        datetime.date: Parsed date.
    """
    if isinstance(date, datetime.datetime):
        return date.date()

    if isinstance(date, datetime.date):
        return date

    # bool is an int
    if isinstance(date, (int, float)) and not isinstance(date, bool):
        return parseEpoch(date)

    if not isinstance(date, str):
        raise ValueError(f"Unsupported date type: {type(date).__name__}.")

    try:
        return dateParser.isoparse(date.strip()).date()
    except (OverflowError, ValueError) as e:
        raise ValueError(
            f"Invalid date format: {date!r}. Please use an ISO-8601 date, "
            "Ex: YYYY-MM-DD."
        ) from e


def getFormattedDate(parsedDate: datetime.date) -> str:
    """Get formatted date.

    Args:
        parsedDate (datetime.date): Parsed date.

    Returns:
        str: Formatted date, "DD MMM YYYY".
    """
    # four-digit year, English month, for any locale
    return (
        f"{parsedDate.day:02d} "
        f"{MONTH_ABR[parsedDate.month - 1]} "
        f"{parsedDate.year:04d}"
    )


def formatDate(date: Any) -> str:
    """Parse and format date."""
    return getFormattedDate(parseDate(date))


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python script.py <date>")
        sys.exit(1)

    print(formatDate(sys.argv[1]))
