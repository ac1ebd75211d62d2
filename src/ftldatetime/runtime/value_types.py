"""Core value types for the datetime runtime.

Defines the fundamental types shared by the formatter, the memoizers, the
DATETIME function and the bundle:
    - NaiveDateTime: Validated zone-less date-time that can hold a leap second
    - FluentType: Extension point for custom values rendered by a host engine
    - FluentErrorValue: Sentinel a function returns instead of a value
    - FluentValue: Union of all values a function may receive or return

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import calendar
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import MAXYEAR, MINYEAR, date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Self

from ftldatetime.constants import FALLBACK_UNFORMATTABLE
from ftldatetime.diagnostics import FieldSetError, FluentError

if TYPE_CHECKING:
    from .memoizer import ConcurrentIntlLangMemoizer, IntlLangMemoizer, LangMemoizer

__all__ = [
    "FluentErrorValue",
    "FluentType",
    "FluentValue",
    "NaiveDateTime",
]

logger = logging.getLogger(__name__)

_MAX_NANOSECOND: int = 999_999_999
_LEAP_SECOND: int = 60

# YYYY-MM-DD, optionally followed by [T ]HH:MM[:SS[.fffffffff]]
_ISO_PATTERN = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[T ](?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?)?"
)


@dataclass(frozen=True, slots=True)
class NaiveDateTime:
    """Calendar date plus time of day, with no zone or offset attached.

    Uses the proleptic Gregorian calendar, which is what Python's datetime
    uses and what ISO 8601 dates denote. Unlike datetime, second may be 60
    so a leap second survives until formatting decides what to do with it.

    Attributes:
        year: 1..9999
        month: 1..12
        day: 1..days in month
        hour: 0..23
        minute: 0..59
        second: 0..60 (60 is a leap second)
        nanosecond: 0..999999999

    Example:
        >>> NaiveDateTime.parse("1989-11-09 23:30")
        NaiveDateTime(year=1989, month=11, day=9, hour=23, minute=30, second=0, nanosecond=0)
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    def __post_init__(self) -> None:
        """Reject out-of-range fields.

        Raises:
            ValueError: If any field is outside its range
        """
        if not MINYEAR <= self.year <= MAXYEAR:
            msg = f"year must be in {MINYEAR}..{MAXYEAR}, got {self.year}"
            raise ValueError(msg)
        if not 1 <= self.month <= 12:
            msg = f"month must be in 1..12, got {self.month}"
            raise ValueError(msg)
        days_in_month = calendar.monthrange(self.year, self.month)[1]
        if not 1 <= self.day <= days_in_month:
            msg = f"day must be in 1..{days_in_month} for {self.year}-{self.month:02d}, got {self.day}"
            raise ValueError(msg)
        if not 0 <= self.hour <= 23:
            msg = f"hour must be in 0..23, got {self.hour}"
            raise ValueError(msg)
        if not 0 <= self.minute <= 59:
            msg = f"minute must be in 0..59, got {self.minute}"
            raise ValueError(msg)
        if not 0 <= self.second <= _LEAP_SECOND:
            msg = f"second must be in 0..{_LEAP_SECOND}, got {self.second}"
            raise ValueError(msg)
        if not 0 <= self.nanosecond <= _MAX_NANOSECOND:
            msg = f"nanosecond must be in 0..{_MAX_NANOSECOND}, got {self.nanosecond}"
            raise ValueError(msg)

    @classmethod
    def parse(cls, text: str) -> NaiveDateTime:
        """Parse an ISO 8601 style date or date-time without offset.

        Accepts "YYYY-MM-DD", "YYYY-MM-DD HH:MM", "YYYY-MM-DDTHH:MM:SS" and
        fractional seconds up to nanoseconds. Second 60 is accepted.

        Args:
            text: Date-time string

        Returns:
            Parsed NaiveDateTime

        Raises:
            ValueError: If the string does not match or a field is out of range
        """
        match = _ISO_PATTERN.fullmatch(text.strip())
        if match is None:
            msg = f"Invalid date-time string '{text}': expected YYYY-MM-DD[ HH:MM[:SS[.f]]]"
            raise ValueError(msg)
        fraction = match["fraction"] or ""
        return cls(
            year=int(match["year"]),
            month=int(match["month"]),
            day=int(match["day"]),
            hour=int(match["hour"] or 0),
            minute=int(match["minute"] or 0),
            second=int(match["second"] or 0),
            nanosecond=int(fraction.ljust(9, "0")) if fraction else 0,
        )

    @classmethod
    def from_datetime(cls, value: datetime | date) -> NaiveDateTime:
        """Build from a naive datetime, or a date at midnight.

        Raises:
            ValueError: If value carries a tzinfo
        """
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                msg = f"naive datetime required, got tzinfo={value.tzinfo!r}"
                raise ValueError(msg)
            return cls(
                year=value.year,
                month=value.month,
                day=value.day,
                hour=value.hour,
                minute=value.minute,
                second=value.second,
                nanosecond=value.microsecond * 1000,
            )
        return cls(year=value.year, month=value.month, day=value.day)

    @property
    def is_leap_second(self) -> bool:
        """Whether the seconds field holds a leap second."""
        return self.second == _LEAP_SECOND

    def clamp_leap_second(self) -> NaiveDateTime:
        """Return the last representable instant of a leap-second minute.

        Non-leap values are returned unchanged.
        """
        if not self.is_leap_second:
            return self
        return replace(self, second=_LEAP_SECOND - 1, nanosecond=_MAX_NANOSECOND)

    def to_datetime(self) -> datetime:
        """Convert to a naive stdlib datetime (microsecond precision).

        Raises:
            ValueError: If the value holds a leap second; clamp it first
        """
        if self.is_leap_second:
            msg = f"{self.isoformat()} is a leap second; clamp before converting"
            raise ValueError(msg)
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond // 1000,
        )

    def isoformat(self) -> str:
        """ISO 8601 text, used for fallbacks and log lines."""
        text = (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        if self.nanosecond:
            text += f".{self.nanosecond:09d}".rstrip("0")
        return text


class FluentType(ABC):
    """Extension point for custom values a host engine can render.

    Subclasses implement format(), which may raise FluentError. The two
    string conversions wrap it for hosts that cannot take an exception in
    the middle of a render: they log and return an empty string instead.
    """

    __slots__ = ()

    @abstractmethod
    def duplicate(self) -> Self:
        """Return an independent copy."""

    @abstractmethod
    def format(self, memoizer: LangMemoizer) -> str:
        """Render this value using formatters cached in memoizer.

        Raises:
            FluentError: If a formatter cannot be built or applied
        """

    def as_string(self, memoizer: IntlLangMemoizer) -> str:
        """Render with a single-threaded memoizer; never raises FluentError."""
        return self._format_or_empty(memoizer)

    def as_string_threadsafe(self, memoizer: ConcurrentIntlLangMemoizer) -> str:
        """Render with a concurrent memoizer; never raises FluentError."""
        return self._format_or_empty(memoizer)

    def _format_or_empty(self, memoizer: LangMemoizer) -> str:
        try:
            return self.format(memoizer)
        except FieldSetError:
            logger.exception("Internal field-set error while formatting %r", self)
            return FALLBACK_UNFORMATTABLE
        except FluentError as e:
            logger.warning("Formatting %r for '%s' failed: %s", self, memoizer.language, e)
            return FALLBACK_UNFORMATTABLE


@dataclass(frozen=True, slots=True)
class FluentErrorValue:
    """Returned by a function that refuses to produce a value.

    The host records error and renders its fallback for the call; text
    around the placeable is unaffected.

    Attributes:
        error: Why the function refused
    """

    error: FluentError

    def __str__(self) -> str:
        """Error values have no display form."""
        return FALLBACK_UNFORMATTABLE


# Type alias for values accepted and returned by registered functions.
type FluentValue = (
    str
    | int
    | float
    | bool
    | Decimal
    | FluentType
    | FluentErrorValue
    | None
)
