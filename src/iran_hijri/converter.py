"""Conversions between the Jalaali, Gregorian and Hijri calendars.

Every conversion pivots through a Julian Day Number. Going into Hijri, the
tabular calendar gives a first estimate of the year, and the official table
is consulted around it; going out of Hijri, the official table is used
directly when it records the requested month. Either way the result says
which of the two produced the day count.
"""

from functools import lru_cache
from typing import Optional, Tuple

from .calendars import tabular
from .calendars.jalaali import jalaali_to_jdn, jdn_to_jalaali
from .calendars.julian_calc import gregorian_to_jdn, jdn_to_gregorian
from .calendars.types import ConversionResult, Source, SourceInfo
from .calendars.validation import (
    is_valid_gregorian_date,
    is_valid_hijri_date,
    is_valid_jalaali_date,
)
from .calendars.weekday import weekday_for_jdn
from .errors import InvalidDateError, YearOutOfSupportedRangeError
from .logging import get_logger
from .official.loader import bundled_table, table_from_environment
from .official.resolver import OfficialTable

logger = get_logger(__name__)


class HijriConverter:
    """Converts dates to and from Hijri, preferring an official table.

    Converters hold no mutable state and can be shared between threads.
    """

    def __init__(self, table: Optional[OfficialTable] = None):
        """Initialize the converter.

        Args:
            table: Official month lengths to prefer over the tabular calendar.
                Defaults to the table bundled with the package.
        """
        self.table = table if table is not None else bundled_table()

    def jalaali_to_hijri(self, year: int, month: int, day: int) -> ConversionResult:
        """Convert a Jalaali date to Hijri.

        Raises:
            InvalidDateError: If the Jalaali date does not exist
            YearOutOfSupportedRangeError: If the date precedes the Hijri epoch
        """
        if not is_valid_jalaali_date(year, month, day):
            raise InvalidDateError(f"Invalid Jalaali date: {year}/{month}/{day}")
        return self._jdn_to_hijri(jalaali_to_jdn(year, month, day))

    def gregorian_to_hijri(self, year: int, month: int, day: int) -> ConversionResult:
        """Convert a Gregorian date to Hijri.

        Raises:
            InvalidDateError: If the Gregorian date does not exist
            YearOutOfSupportedRangeError: If the date precedes the Hijri epoch
        """
        if not is_valid_gregorian_date(year, month, day):
            raise InvalidDateError(f"Invalid Gregorian date: {year}/{month}/{day}")
        return self._jdn_to_hijri(gregorian_to_jdn(year, month, day))

    def hijri_to_jalaali(self, year: int, month: int, day: int) -> ConversionResult:
        """Convert a Hijri date to Jalaali.

        The Jalaali break table ends at year 3177, which Hijri dates reach
        from roughly the year 3270 on.

        Raises:
            InvalidDateError: If the Hijri date does not exist
            YearOutOfSupportedRangeError: If the Hijri year is outside 1-5000,
                or the date falls past the last supported Jalaali year
        """
        jdn, source = self._hijri_to_jdn(year, month, day)
        return ConversionResult(
            date=jdn_to_jalaali(jdn),
            source=source,
            weekday=weekday_for_jdn(jdn),
            jdn=jdn,
        )

    def hijri_to_gregorian(self, year: int, month: int, day: int) -> ConversionResult:
        """Convert a Hijri date to Gregorian.

        Raises:
            InvalidDateError: If the Hijri date does not exist
            YearOutOfSupportedRangeError: If the Hijri year is outside 1-5000
        """
        jdn, source = self._hijri_to_jdn(year, month, day)
        return ConversionResult(
            date=jdn_to_gregorian(jdn),
            source=source,
            weekday=weekday_for_jdn(jdn),
            jdn=jdn,
        )

    def get_source_info(self, year: int, month: int = 1) -> SourceInfo:
        """Report whether the official table governs a Hijri year/month."""
        has_official = self.table.has_data(year, month)
        return SourceInfo(
            has_official_data=has_official,
            source=Source.OFFICIAL if has_official else Source.TABULAR,
            official_data_range=self.table.range(),
        )

    def _jdn_to_hijri(self, jdn: int) -> ConversionResult:
        estimate = tabular.jdn_to_hijri(jdn)
        official = self.table.find_hijri(jdn, estimate.year)

        if official is not None:
            date, source = official, Source.OFFICIAL
        else:
            date, source = estimate, Source.TABULAR
        logger.debug(f"JDN {jdn} -> Hijri {date} ({source.value})")

        return ConversionResult(
            date=date,
            source=source,
            weekday=weekday_for_jdn(jdn),
            jdn=jdn,
        )

    def _hijri_to_jdn(self, year: int, month: int, day: int) -> Tuple[int, Source]:
        if not is_valid_hijri_date(year, month, day):
            if isinstance(year, int) and not (
                tabular.MIN_YEAR <= year <= tabular.MAX_YEAR
            ):
                raise YearOutOfSupportedRangeError(
                    f"Hijri year {year} is outside the supported range "
                    f"{tabular.MIN_YEAR}..{tabular.MAX_YEAR}"
                )
            raise InvalidDateError(f"Invalid Hijri date: {year}/{month}/{day}")

        month_length = self.table.month_length(year, month)
        if month_length is not None:
            if day > month_length:
                raise InvalidDateError(
                    f"Invalid Hijri date: {year}/{month}/{day} "
                    f"(month has {month_length} days)"
                )
            jdn = self.table.hijri_to_jdn(year, month, day)
            if jdn is not None:
                return jdn, Source.OFFICIAL
            logger.warning(
                f"Official data for Hijri {year}/{month} is not reachable across "
                "missing years; using the tabular calendar"
            )

        return tabular.hijri_to_jdn(year, month, day), Source.TABULAR


@lru_cache(maxsize=None)
def get_default_converter() -> HijriConverter:
    """Return the shared converter, built on first use.

    Uses the table named by IRAN_HIJRI_TABLE if set, otherwise the bundled one.
    """
    table = table_from_environment()
    return HijriConverter(table)


def jalaali_to_hijri(year: int, month: int, day: int) -> ConversionResult:
    return get_default_converter().jalaali_to_hijri(year, month, day)


def gregorian_to_hijri(year: int, month: int, day: int) -> ConversionResult:
    return get_default_converter().gregorian_to_hijri(year, month, day)


def hijri_to_jalaali(year: int, month: int, day: int) -> ConversionResult:
    return get_default_converter().hijri_to_jalaali(year, month, day)


def hijri_to_gregorian(year: int, month: int, day: int) -> ConversionResult:
    return get_default_converter().hijri_to_gregorian(year, month, day)


def get_source_info(year: int, month: int = 1) -> SourceInfo:
    return get_default_converter().get_source_info(year, month)
