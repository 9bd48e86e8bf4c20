"""Value types shared by the calendar engines and the converter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union


class Source(Enum):
    """Which engine produced the day count behind a conversion."""

    OFFICIAL = "official"
    TABULAR = "tabular"


@dataclass(frozen=True)
class _CalendarDate:
    year: int
    month: int
    day: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class GregorianDate(_CalendarDate):
    """A date in the proleptic Gregorian calendar."""


@dataclass(frozen=True)
class JalaaliDate(_CalendarDate):
    """A date in the Jalaali (Persian solar hijri) calendar."""


@dataclass(frozen=True)
class HijriDate(_CalendarDate):
    """A date in the Hijri (lunar) calendar."""


@dataclass(frozen=True)
class Weekday:
    """Weekday labels for a day, numbered from Monday = 0."""

    arabic: str
    persian: str
    english: str
    number: int

    def to_dict(self) -> Dict[str, Union[str, int]]:
        return {
            "ar": self.arabic,
            "fa": self.persian,
            "en": self.english,
            "number": self.number,
        }


@dataclass(frozen=True)
class ConversionResult:
    """The target date of a conversion along with how it was obtained."""

    date: Union[GregorianDate, JalaaliDate, HijriDate]
    source: Source
    weekday: Weekday
    jdn: int

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    def to_dict(self) -> Dict[str, object]:
        """Return a serializable dictionary representation of the result."""
        return {
            "year": self.date.year,
            "month": self.date.month,
            "day": self.date.day,
            "source": self.source.value,
            "weekday": self.weekday.to_dict(),
            "jdn": self.jdn,
        }


@dataclass(frozen=True)
class OfficialRange:
    """First and last Hijri years present in an official table."""

    min_year: int
    max_year: int


@dataclass(frozen=True)
class SourceInfo:
    """Which engine would govern conversions of a Hijri year/month."""

    has_official_data: bool
    source: Source
    official_data_range: Optional[OfficialRange]

    def to_dict(self) -> Dict[str, object]:
        rng = self.official_data_range
        return {
            "has_official_data": self.has_official_data,
            "source": self.source.value,
            "official_data_range": (
                None
                if rng is None
                else {"min_year": rng.min_year, "max_year": rng.max_year}
            ),
        }
