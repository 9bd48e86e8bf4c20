"""Julian Day Number calculation module.

This module converts between proleptic Gregorian dates and integer Julian Day
Numbers (JDN), the day count every calendar in this package pivots through.
The integer algorithm of Fliegel and Van Flandern is used, so years before
the Gregorian reform (and years <= 0) are handled arithmetically.
"""

from ..errors import InvalidDateError
from .types import GregorianDate

# Days in each Gregorian month of a common year
GREGORIAN_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap_year(year: int) -> bool:
    """Return True if the Gregorian year has a 29th of February."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def gregorian_month_length(year: int, month: int) -> int:
    """Return the number of days in a Gregorian month.

    Raises:
        InvalidDateError: If month is not in 1-12
    """
    if month < 1 or month > 12:
        raise InvalidDateError(f"Invalid Gregorian month: {month}")
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return GREGORIAN_MONTH_LENGTHS[month - 1]


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a Gregorian date to Julian Day Number.

    Args:
        year: Year in the proleptic Gregorian calendar (any integer)
        month: Month in Gregorian calendar (1-12)
        day: Day in Gregorian calendar

    Returns:
        Julian Day Number

    Raises:
        InvalidDateError: If month is not in 1-12
    """
    if month < 1 or month > 12:
        raise InvalidDateError(f"Invalid Gregorian month: {month}")

    # Shift the year to start in March so the leap day falls at the end
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3

    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def jdn_to_gregorian(jdn: int) -> GregorianDate:
    """Convert a Julian Day Number to a Gregorian date.

    Args:
        jdn: Julian Day Number

    Returns:
        The Gregorian date for that day
    """
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10

    return GregorianDate(year, month, day)
