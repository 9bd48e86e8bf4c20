"""Date validators.

These never raise: anything that is not a well-formed date, including
non-integer fields, is reported as invalid.
"""

from . import jalaali, tabular
from .julian_calc import gregorian_month_length


def _are_ints(*values: object) -> bool:
    return all(isinstance(v, int) and not isinstance(v, bool) for v in values)


def is_valid_gregorian_date(year: int, month: int, day: int) -> bool:
    """Return True for a Gregorian date in year 1 or later, leap-aware."""
    if not _are_ints(year, month, day):
        return False
    if year < 1 or month < 1 or month > 12 or day < 1:
        return False
    return day <= gregorian_month_length(year, month)


def is_valid_jalaali_date(year: int, month: int, day: int) -> bool:
    """Return True for a Jalaali date the intercalation engine can handle.

    Esfand 30 is only valid in leap years.
    """
    if not _are_ints(year, month, day):
        return False
    if year < 1 or year > jalaali.MAX_YEAR:
        return False
    if month < 1 or month > 12 or day < 1:
        return False
    return day <= jalaali.jalaali_month_length(year, month)


def is_valid_hijri_date(year: int, month: int, day: int) -> bool:
    """Return True for a Hijri date in 1-5000 with a day of at most 30.

    Month lengths are not checked here since they depend on which source
    governs the month.
    """
    if not _are_ints(year, month, day):
        return False
    if year < tabular.MIN_YEAR or year > tabular.MAX_YEAR:
        return False
    return 1 <= month <= 12 and 1 <= day <= 30
