"""Jalaali (Persian solar hijri) calendar calculations.

Leap years follow the break-point approximation of the vernal equinox: the
years in ``BREAKS`` bound cycles of varying length, and within a cycle leap
years recur on a 33-year pattern. This is arithmetic, not observation, so it
can drift from any officially announced calendar outside the years it was
fitted to.
"""

from typing import Tuple

from ..errors import YearOutOfSupportedRangeError
from .julian_calc import gregorian_to_jdn, jdn_to_gregorian
from .types import GregorianDate, JalaaliDate

# Jalaali years starting a new leap cycle
BREAKS = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181,
    1210, 1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)

MIN_YEAR = BREAKS[0]
MAX_YEAR = BREAKS[-1] - 1

# Jalaali year 1 starts in Gregorian 622
GREGORIAN_OFFSET = 621


def _jal_cal(year: int) -> Tuple[int, int, int]:
    """Locate a Jalaali year in its leap cycle.

    Args:
        year: Jalaali year

    Returns:
        Tuple of (years since the last leap year, Gregorian year in which the
        Jalaali year begins, day of March of Farvardin 1). The year itself is
        leap when the first element is 0.

    Raises:
        YearOutOfSupportedRangeError: If the year lies outside the break table
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise YearOutOfSupportedRangeError(
            f"Jalaali year {year} is outside the supported range "
            f"{MIN_YEAR}..{MAX_YEAR}"
        )

    gy = year + GREGORIAN_OFFSET
    leap_j = -14
    jp = BREAKS[0]
    jump = 0

    # Count Jalaali leap days up to the start of the enclosing cycle
    for jm in BREAKS[1:]:
        jump = jm - jp
        if year < jm:
            break
        leap_j += (jump // 33) * 8 + (jump % 33) // 4
        jp = jm

    n = year - jp
    leap_j += (n // 33) * 8 + (n % 33 + 3) // 4
    if jump % 33 == 4 and jump - n == 4:
        leap_j += 1

    leap_g = gy // 4 - ((gy // 100 + 1) * 3) // 4 - 150
    march = 20 + leap_j - leap_g

    # Near the end of a cycle, count from the start of the next one
    if jump - n < 6:
        n = n - jump + ((jump + 4) // 33) * 33

    residue = (n + 1) % 33 - 1
    leap = 4 if residue == -1 else residue % 4

    return leap, gy, march


def is_jalaali_leap_year(year: int) -> bool:
    """Return True if Esfand (month 12) of the Jalaali year has 30 days."""
    leap, _, _ = _jal_cal(year)
    return leap == 0


def jalaali_month_length(year: int, month: int) -> int:
    """Return the number of days in a Jalaali month.

    Months 1-6 have 31 days, 7-11 have 30, and Esfand has 29 or 30.
    """
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_jalaali_leap_year(year) else 29


def jalaali_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a Jalaali date to a Julian Day Number.

    The day is not checked against the month length; callers validate first.
    """
    _, gy, march = _jal_cal(year)
    return (
        gregorian_to_jdn(gy, 3, march)
        + (month - 1) * 31
        - (month // 7) * (month - 7)
        + day
        - 1
    )


def jdn_to_jalaali(jdn: int) -> JalaaliDate:
    """Convert a Julian Day Number to a Jalaali date.

    Raises:
        YearOutOfSupportedRangeError: If the day falls outside the Jalaali
            years covered by the break table
    """
    gy = jdn_to_gregorian(jdn).year
    year = gy - GREGORIAN_OFFSET
    # The last supported year ends in the Gregorian year after it starts
    if year == MAX_YEAR + 1:
        year = MAX_YEAR
    leap, gy, march = _jal_cal(year)
    k = jdn - gregorian_to_jdn(gy, 3, march)

    if k >= 0:
        # First six months have 31 days each
        if k <= 185:
            return JalaaliDate(year, 1 + k // 31, k % 31 + 1)
        k -= 186
        if k >= 150 + (30 if leap == 0 else 29):
            raise YearOutOfSupportedRangeError(
                f"JDN {jdn} is past the last supported Jalaali year {MAX_YEAR}"
            )
    else:
        # Before Nowruz: the tail of the previous Jalaali year
        year -= 1
        k += 179
        if leap == 1:
            k += 1

    return JalaaliDate(year, 7 + k // 30, k % 30 + 1)


def jalaali_to_gregorian(year: int, month: int, day: int) -> GregorianDate:
    return jdn_to_gregorian(jalaali_to_jdn(year, month, day))


def gregorian_to_jalaali(year: int, month: int, day: int) -> JalaaliDate:
    return jdn_to_jalaali(gregorian_to_jdn(year, month, day))
