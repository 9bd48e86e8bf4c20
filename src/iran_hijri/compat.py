"""Short aliases for callers that only need Gregorian <-> Hijri dates.

These forward to the default converter and drop the source and weekday
metadata.
"""

from .calendars.types import GregorianDate, HijriDate
from .converter import gregorian_to_hijri, hijri_to_gregorian


def to_hijri(year: int, month: int, day: int) -> HijriDate:
    """Convert a Gregorian date to Hijri, preferring official data."""
    result = gregorian_to_hijri(year, month, day)
    return HijriDate(*result.date.as_tuple())


def to_gregorian(year: int, month: int, day: int) -> GregorianDate:
    """Convert a Hijri date to Gregorian, preferring official data."""
    result = hijri_to_gregorian(year, month, day)
    return GregorianDate(*result.date.as_tuple())
