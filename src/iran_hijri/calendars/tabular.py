"""Tabular (arithmetic) Hijri calendar calculations.

The tabular calendar approximates the lunar calendar with a 30-year cycle:

- 19 common years of 354 days
- 11 leap years of 355 days, the extra day going to Dhu al-Hijjah (month 12)

Months 1-11 alternate between 30 and 29 days. This is used whenever no
official month lengths are available, and as the first estimate when looking
a day up in the official table.
"""

from ..errors import InvalidDateError, YearOutOfSupportedRangeError
from .types import HijriDate

# 1 Muharram 1 AH (Friday, 19 July 622 Julian) under the Iranian convention.
# Libraries using the Umm al-Qura epoch land one day later.
HIJRI_EPOCH = 1948440

# Leap years, 1-indexed within each 30-year cycle
LEAP_YEARS_IN_CYCLE = (2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29)

TABULAR_MONTH_LENGTHS = (30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29)

YEARS_PER_CYCLE = 30
# 19 * 354 + 11 * 355
DAYS_PER_CYCLE = 10631

MIN_YEAR = 1
MAX_YEAR = 5000


def _check_year(year: int) -> None:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise YearOutOfSupportedRangeError(
            f"Hijri year {year} is outside the supported range {MIN_YEAR}..{MAX_YEAR}"
        )


def is_tabular_leap_year(year: int) -> bool:
    """Return True if the Hijri year has 355 days in the tabular calendar."""
    year_in_cycle = (year - 1) % YEARS_PER_CYCLE + 1
    return year_in_cycle in LEAP_YEARS_IN_CYCLE


def tabular_month_length(year: int, month: int) -> int:
    """Return the number of days (29 or 30) in a tabular Hijri month."""
    if month < 1 or month > 12:
        raise InvalidDateError(f"Invalid Hijri month: {month}")
    if month < 12:
        return TABULAR_MONTH_LENGTHS[month - 1]
    return 30 if is_tabular_leap_year(year) else 29


def tabular_year_length(year: int) -> int:
    """Return the number of days (354 or 355) in a tabular Hijri year."""
    return 355 if is_tabular_leap_year(year) else 354


def days_from_epoch(year: int, month: int, day: int) -> int:
    """Count the days from 1 Muharram 1 AH to the given tabular Hijri date.

    Args:
        year: Hijri year (1-5000)
        month: Hijri month (1-12)
        day: Hijri day (1-30)

    Returns:
        Days elapsed since the epoch (0 for 1/1/1)

    Raises:
        YearOutOfSupportedRangeError: If the year is outside 1-5000
    """
    _check_year(year)

    complete_years = year - 1
    total = (complete_years // YEARS_PER_CYCLE) * DAYS_PER_CYCLE

    # Positions within a cycle repeat, so the first cycle's years stand in
    for y in range(1, complete_years % YEARS_PER_CYCLE + 1):
        total += tabular_year_length(y)

    for m in range(1, month):
        total += tabular_month_length(year, m)

    return total + day - 1


def days_from_epoch_to_hijri(days: int) -> HijriDate:
    """Convert a count of days since the Hijri epoch to a tabular date.

    Raises:
        YearOutOfSupportedRangeError: If the day count is negative or lands
            past the last supported year
    """
    if days < 0:
        raise YearOutOfSupportedRangeError("Day is before the Hijri epoch")

    cycles, remaining = divmod(days, DAYS_PER_CYCLE)

    year = cycles * YEARS_PER_CYCLE + 1
    while remaining >= tabular_year_length(year):
        remaining -= tabular_year_length(year)
        year += 1
    _check_year(year)

    month = 1
    while month < 12 and remaining >= tabular_month_length(year, month):
        remaining -= tabular_month_length(year, month)
        month += 1

    return HijriDate(year, month, remaining + 1)


def hijri_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a tabular Hijri date to a Julian Day Number."""
    return HIJRI_EPOCH + days_from_epoch(year, month, day)


def jdn_to_hijri(jdn: int) -> HijriDate:
    """Convert a Julian Day Number to a tabular Hijri date."""
    return days_from_epoch_to_hijri(jdn - HIJRI_EPOCH)
