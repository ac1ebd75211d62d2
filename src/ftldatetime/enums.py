"""Enumerations for ftl-datetime type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Two groups live here:
    - User-facing style lengths (DateLength, TimeLength). Their values are the
      exact spellings accepted by DATETIME(dateStyle: ..., timeStyle: ...).
    - Field-set vocabulary (DateFields, FieldLength, TimePrecision, ZoneStyle)
      consumed by the formatter. Users never spell these directly.

Python 3.13+.
"""

from enum import StrEnum


class DateLength(StrEnum):
    """Length a date part can be formatted into, from verbose to compact.

    Lengths correspond to UTS #35 (Unicode LDML, Dates) dateFormats.

    StrEnum provides automatic string conversion: str(DateLength.FULL) == "full"
    """

    FULL = "full"
    """Full length, usually with weekday name: Tuesday, January 21, 2020 (en-US)"""

    LONG = "long"
    """Long length, with wide month name: September 10, 2020 (en-US)"""

    MEDIUM = "medium"
    """Medium length: Feb 20, 2020 (en-US)"""

    SHORT = "short"
    """Short length, usually with numeric month: 1/30/20 (en-US)"""


class TimeLength(StrEnum):
    """Length a time part can be formatted into, from verbose to compact.

    Lengths correspond to UTS #35 (Unicode LDML, Dates) timeFormats.

    StrEnum provides automatic string conversion: str(TimeLength.SHORT) == "short"
    """

    FULL = "full"
    """Seconds and spelled out zone name: 8:25:07 AM Pacific Standard Time (en-US)"""

    LONG = "long"
    """Seconds and short zone code: 8:25:07 AM PST (en-US)"""

    MEDIUM = "medium"
    """Seconds, no zone: 8:25:07 AM (en-US)"""

    SHORT = "short"
    """Minutes, no zone: 8:25 AM (en-US)"""


class DateFields(StrEnum):
    """Which calendar fields a field set renders."""

    YMD = "ymd"
    """Year, month and day."""

    YMDE = "ymde"
    """Year, month, day and weekday."""


class FieldLength(StrEnum):
    """Verbosity tier for date fields.

    Only three tiers exist: DateLength.FULL and DateLength.LONG share LONG,
    the weekday field is what tells them apart.
    """

    LONG = "long"
    MEDIUM = "medium"
    SHORT = "short"


class TimePrecision(StrEnum):
    """Smallest time unit a field set renders."""

    MINUTE = "minute"
    SECOND = "second"


class ZoneStyle(StrEnum):
    """How the time zone is displayed, when at all."""

    SPECIFIC_LONG = "specific_long"
    """Spelled out, DST-aware: Pacific Standard Time"""

    SPECIFIC_SHORT = "specific_short"
    """Abbreviated, DST-aware: PST (or GMT-8 where no abbreviation exists)"""


__all__ = [
    "DateFields",
    "DateLength",
    "FieldLength",
    "TimeLength",
    "TimePrecision",
    "ZoneStyle",
]
