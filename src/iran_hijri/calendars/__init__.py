"""Calendar engines: Gregorian/JDN, Jalaali, tabular Hijri, and weekdays."""

from .julian_calc import (
    gregorian_to_jdn,
    jdn_to_gregorian,
    is_gregorian_leap_year,
    gregorian_month_length,
)
from .jalaali import (
    is_jalaali_leap_year,
    jalaali_month_length,
    jalaali_to_jdn,
    jdn_to_jalaali,
    jalaali_to_gregorian,
    gregorian_to_jalaali,
)
from .types import (
    ConversionResult,
    GregorianDate,
    HijriDate,
    JalaaliDate,
    OfficialRange,
    Source,
    SourceInfo,
    Weekday,
)
from .validation import (
    is_valid_gregorian_date,
    is_valid_hijri_date,
    is_valid_jalaali_date,
)
from .weekday import weekday_for_jdn, weekday_number

__all__ = [
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    "is_gregorian_leap_year",
    "gregorian_month_length",
    "is_jalaali_leap_year",
    "jalaali_month_length",
    "jalaali_to_jdn",
    "jdn_to_jalaali",
    "jalaali_to_gregorian",
    "gregorian_to_jalaali",
    "ConversionResult",
    "GregorianDate",
    "HijriDate",
    "JalaaliDate",
    "OfficialRange",
    "Source",
    "SourceInfo",
    "Weekday",
    "is_valid_gregorian_date",
    "is_valid_hijri_date",
    "is_valid_jalaali_date",
    "weekday_for_jdn",
    "weekday_number",
]
