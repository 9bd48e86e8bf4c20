"""Exceptions raised by iran_hijri."""


class IranHijriError(Exception):
    """Base class for all iran_hijri errors."""

    pass


class InvalidDateError(IranHijriError, ValueError):
    """Raised when a month or day is out of range for its calendar and year."""

    pass


class YearOutOfSupportedRangeError(IranHijriError, ValueError):
    """Raised when a year (or day number) falls outside an engine's domain."""

    pass


class TableFormatError(IranHijriError, ValueError):
    """Raised when an official month-length table is malformed."""

    pass
