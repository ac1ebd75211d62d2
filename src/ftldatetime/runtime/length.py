"""Style bag: the two coarse presentation axes users can choose.

A StyleBag holds at most one DateLength and one TimeLength. The empty bag
(neither chosen) is a distinguished state meaning "apply the default policy",
which mirrors Intl.DateTimeFormat: when no component or style option is
given, year/month/day default to numeric. Here that becomes a short date and
no time.

StyleBag is a frozen value type. "Setters" return a new bag with one axis
replaced; the mutable holder users touch is DateTimeOptions.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from ftldatetime.enums import (
    DateFields,
    DateLength,
    FieldLength,
    TimeLength,
    TimePrecision,
    ZoneStyle,
)

from .fieldset import CompiledFieldSet, FieldSetBuilder

__all__ = ["StyleBag"]

_DATE_LENGTHS: dict[DateLength, FieldLength] = {
    DateLength.FULL: FieldLength.LONG,
    DateLength.LONG: FieldLength.LONG,
    DateLength.MEDIUM: FieldLength.MEDIUM,
    DateLength.SHORT: FieldLength.SHORT,
}

_ZONE_STYLES: dict[TimeLength, ZoneStyle] = {
    TimeLength.FULL: ZoneStyle.SPECIFIC_LONG,
    TimeLength.LONG: ZoneStyle.SPECIFIC_SHORT,
}


@dataclass(frozen=True, slots=True)
class StyleBag:
    """Date and time style selection.

    Attributes:
        date: Date style, or None when the date is not shown explicitly
        time: Time style, or None when the time is not shown

    Example:
        >>> StyleBag.empty().is_empty
        True
        >>> StyleBag.empty().set_date_style(DateLength.FULL)
        StyleBag(date=<DateLength.FULL: 'full'>, time=None)
    """

    date: DateLength | None = None
    time: TimeLength | None = None

    @classmethod
    def empty(cls) -> StyleBag:
        """Bag with no style chosen (default policy applies)."""
        return cls()

    @property
    def is_empty(self) -> bool:
        """Whether neither axis is set."""
        return self == StyleBag.empty()

    def set_date_style(self, style: DateLength | None) -> StyleBag:
        """Return a copy with the date axis replaced (None unsets it)."""
        return replace(self, date=style)

    def set_time_style(self, style: TimeLength | None) -> StyleBag:
        """Return a copy with the time axis replaced (None unsets it)."""
        return replace(self, time=style)

    def __hash__(self) -> int:
        # Only the kind of each style participates. Equal bags always hash
        # equal; a future sub-option inside a style would share the bucket.
        return hash((self.date, self.time))

    def as_fieldset(self) -> CompiledFieldSet:
        """Compile this bag into a formatter field set.

        Mapping:
            - empty bag -> short date, no time
            - date FULL -> year/month/day/weekday at LONG
            - date LONG/MEDIUM/SHORT -> year/month/day at LONG/MEDIUM/SHORT
            - time SHORT -> minute precision, otherwise second precision
            - time FULL -> specific long zone, LONG -> specific short zone

        Returns:
            CompiledFieldSet for this bag

        Raises:
            FieldSetError: Never for a reachable bag; signals a compiler bug
        """
        date, time = (DateLength.SHORT, None) if self.is_empty else (self.date, self.time)

        builder = FieldSetBuilder()
        if date is not None:
            builder.date_fields = DateFields.YMDE if date is DateLength.FULL else DateFields.YMD
            builder.length = _DATE_LENGTHS[date]
        if time is not None:
            builder.time_precision = (
                TimePrecision.MINUTE if time is TimeLength.SHORT else TimePrecision.SECOND
            )
            builder.zone_style = _ZONE_STYLES.get(time)
        return builder.build()
