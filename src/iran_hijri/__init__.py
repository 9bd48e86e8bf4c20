"""iran_hijri public API.

Convert between Jalaali, Gregorian and Hijri dates, using Iran's officially
observed Hijri month lengths where they are known and the tabular Hijri
calendar elsewhere.
"""

from .calendars.types import (
    ConversionResult,
    GregorianDate,
    HijriDate,
    JalaaliDate,
    OfficialRange,
    Source,
    SourceInfo,
    Weekday,
)
from .calendars.validation import (
    is_valid_gregorian_date,
    is_valid_hijri_date,
    is_valid_jalaali_date,
)
from .converter import (
    HijriConverter,
    get_default_converter,
    gregorian_to_hijri,
    hijri_to_gregorian,
    hijri_to_jalaali,
    jalaali_to_hijri,
    get_source_info,
)
from .errors import (
    InvalidDateError,
    IranHijriError,
    TableFormatError,
    YearOutOfSupportedRangeError,
)
from .official import OfficialTable, load_table

__all__ = [
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
    "HijriConverter",
    "get_default_converter",
    "gregorian_to_hijri",
    "hijri_to_gregorian",
    "hijri_to_jalaali",
    "jalaali_to_hijri",
    "get_source_info",
    "InvalidDateError",
    "IranHijriError",
    "TableFormatError",
    "YearOutOfSupportedRangeError",
    "OfficialTable",
    "load_table",
]
