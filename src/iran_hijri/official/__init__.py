"""Official Hijri month-length data and lookups."""

from .data import OFFICIAL_MONTH_LENGTHS
from .loader import bundled_table, load_table, table_from_environment
from .resolver import OfficialTable

__all__ = [
    "OFFICIAL_MONTH_LENGTHS",
    "OfficialTable",
    "bundled_table",
    "load_table",
    "table_from_environment",
]
