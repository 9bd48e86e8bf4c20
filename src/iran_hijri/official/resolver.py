"""Lookups over an official table of Hijri month lengths.

The table only records how long each month was, not when it started, so the
day count is anchored at the tabular JDN of 1 Muharram of the first year in
the table and accumulated forward from there. Any query the table cannot
answer returns None; deciding what to do instead is the caller's business.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Tuple

from ..calendars import tabular
from ..calendars.types import HijriDate, OfficialRange
from ..errors import TableFormatError
from ..logging import get_logger

logger = get_logger(__name__)

VALID_MONTH_LENGTHS = (29, 30)

# Candidate year offsets tried, in order, around a tabular estimate
PROBE_OFFSETS = (-1, 0, 1)


def check_month_lengths(
    month_lengths: Mapping[int, Sequence[int]],
) -> Dict[int, Tuple[int, ...]]:
    """Validate a year -> month lengths mapping and normalize it to tuples.

    Raises:
        TableFormatError: If a year is not an integer, a year lists no months
            or more than 12, or a month length is not 29 or 30
    """
    checked: Dict[int, Tuple[int, ...]] = {}
    for year, months in month_lengths.items():
        if not isinstance(year, int) or isinstance(year, bool):
            raise TableFormatError(f"Hijri year must be an integer, got {year!r}")
        if year < tabular.MIN_YEAR or year > tabular.MAX_YEAR:
            raise TableFormatError(
                f"Hijri year {year} is outside {tabular.MIN_YEAR}..{tabular.MAX_YEAR}"
            )
        months = tuple(months)
        if not 1 <= len(months) <= 12:
            raise TableFormatError(
                f"Hijri year {year} must list 1 to 12 months, got {len(months)}"
            )
        for index, length in enumerate(months, start=1):
            if (
                not isinstance(length, int)
                or isinstance(length, bool)
                or length not in VALID_MONTH_LENGTHS
            ):
                raise TableFormatError(
                    f"Month {index} of Hijri year {year} has invalid length {length!r}"
                )
        checked[year] = months
    return checked


class OfficialTable:
    """Read-only view of officially observed Hijri month lengths.

    Instances are immutable once built and can be shared between threads.
    """

    def __init__(self, month_lengths: Mapping[int, Sequence[int]]):
        """Build the table.

        Args:
            month_lengths: Hijri year -> lengths of its months in order. Years
                may be missing, and a year may list fewer than 12 months.

        Raises:
            TableFormatError: If the mapping is malformed
        """
        checked = check_month_lengths(month_lengths)
        self._months: Mapping[int, Tuple[int, ...]] = MappingProxyType(
            dict(sorted(checked.items()))
        )

        self._range: Optional[OfficialRange] = None
        self._anchor_jdn: Optional[int] = None
        if self._months:
            years = list(self._months)
            self._range = OfficialRange(min_year=years[0], max_year=years[-1])
            self._anchor_jdn = tabular.hijri_to_jdn(years[0], 1, 1)

    def __len__(self) -> int:
        return len(self._months)

    def __contains__(self, year: object) -> bool:
        return year in self._months

    def __repr__(self) -> str:
        return f"OfficialTable(range={self._range!r}, years={len(self)})"

    @property
    def anchor_jdn(self) -> Optional[int]:
        """JDN of 1 Muharram of the first year in the table, per the tabular calendar."""
        return self._anchor_jdn

    def years(self) -> Tuple[int, ...]:
        return tuple(self._months)

    def range(self) -> Optional[OfficialRange]:
        """Return the first and last years in the table, or None if it is empty."""
        return self._range

    def has_data(self, year: int, month: int = 1) -> bool:
        """Return True if the table records the length of the given month."""
        months = self._months.get(year)
        if months is None:
            return False
        return 1 <= month <= len(months)

    def month_length(self, year: int, month: int) -> Optional[int]:
        if not self.has_data(year, month):
            return None
        return self._months[year][month - 1]

    def year_length(self, year: int) -> Optional[int]:
        """Return the days in a year, counting only recorded months."""
        months = self._months.get(year)
        if months is None:
            return None
        return sum(months)

    def hijri_to_jdn(self, year: int, month: int, day: int) -> Optional[int]:
        """Convert a Hijri date to a JDN using official month lengths.

        Returns:
            The JDN, or None if the month is not in the table or any year
            between the start of the table and the given year is missing
        """
        if self._range is None or self._anchor_jdn is None:
            return None
        if not self.has_data(year, month):
            return None

        days = 0
        for y in range(self._range.min_year, year):
            year_length = self.year_length(y)
            if year_length is None:
                logger.debug(
                    f"No official data for Hijri year {y}; cannot reach {year}/{month}/{day}"
                )
                return None
            days += year_length

        days += sum(self._months[year][: month - 1])
        days += day - 1

        return self._anchor_jdn + days

    def jdn_to_hijri(self, jdn: int) -> Optional[HijriDate]:
        """Convert a JDN to a Hijri date using official month lengths.

        Returns:
            The Hijri date, or None if the JDN is before the start of the table
            or the table runs out (or hits a missing year) before reaching it
        """
        if self._range is None or self._anchor_jdn is None:
            return None

        remaining = jdn - self._anchor_jdn
        if remaining < 0:
            return None

        year = self._range.min_year
        while True:
            months = self._months.get(year)
            if months is None:
                return None
            year_length = sum(months)
            if remaining < year_length:
                break
            remaining -= year_length
            year += 1

        for month, length in enumerate(months, start=1):
            if remaining < length:
                return HijriDate(year, month, remaining + 1)
            remaining -= length

        # Unreachable: remaining is below the sum of the months walked
        return None

    def find_hijri(self, jdn: int, approximate_year: int) -> Optional[HijriDate]:
        """Look up a JDN in the table starting from an estimated Hijri year.

        The tabular estimate and the official table can disagree by a few
        days, which near a new year puts the estimate in a neighbouring year.
        The years just before, at, and just after the estimate are tried in
        that order, and the first that resolves the JDN is used.

        Args:
            jdn: Julian Day Number to convert
            approximate_year: Hijri year from the tabular calendar

        Returns:
            The official Hijri date, or None if no candidate year resolves it
        """
        for offset in PROBE_OFFSETS:
            candidate = approximate_year + offset
            if not self.has_data(candidate):
                logger.debug(f"Probe {candidate}: no official data")
                continue
            result = self.jdn_to_hijri(jdn)
            if result is not None:
                logger.debug(f"Probe {candidate}: resolved JDN {jdn} to {result}")
                return result
            logger.debug(f"Probe {candidate}: JDN {jdn} not covered by the table")
        return None
