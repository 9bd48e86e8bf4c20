"""Weekday names derived from Julian Day Numbers.

JDN 0 fell on a Monday, so ``jdn % 7`` numbers the week from Monday = 0.
"""

from .types import Weekday

ARABIC_WEEKDAYS = (
    "الاثنين",
    "الثلاثاء",
    "الأربعاء",
    "الخميس",
    "الجمعة",
    "السبت",
    "الأحد",
)

PERSIAN_WEEKDAYS = (
    "دوشنبه",
    "سه‌شنبه",
    "چهارشنبه",
    "پنج‌شنبه",
    "جمعه",
    "شنبه",
    "یکشنبه",
)

ENGLISH_WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def weekday_number(jdn: int) -> int:
    """Return the weekday index of a JDN, 0 = Monday through 6 = Sunday."""
    return jdn % 7


def weekday_for_jdn(jdn: int) -> Weekday:
    """Return the Arabic, Persian and English names of a day's weekday."""
    number = weekday_number(jdn)
    return Weekday(
        arabic=ARABIC_WEEKDAYS[number],
        persian=PERSIAN_WEEKDAYS[number],
        english=ENGLISH_WEEKDAYS[number],
        number=number,
    )
