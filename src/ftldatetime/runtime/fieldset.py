"""Field sets: which date/time components a formatter renders, and how.

A field set is the formatter-facing configuration. It is richer than the two
user-facing style lengths: date fields, date length, time precision and zone
display are independent axes here.

Architecture:
    - FieldSetBuilder: mutable, assign axes one by one, then build()
    - CompiledFieldSet: immutable, hashable result consumed by DateTimeFormatter

build() enforces the structural rules every formatter relies on. Combinations
that are structurally fine but missing from some locale's data are rejected
later, at formatter construction.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from ftldatetime.diagnostics import ErrorTemplate, FieldSetError
from ftldatetime.enums import DateFields, FieldLength, TimePrecision, ZoneStyle

__all__ = ["CompiledFieldSet", "FieldSetBuilder"]


@dataclass(frozen=True, slots=True)
class CompiledFieldSet:
    """Immutable formatter configuration.

    Attributes:
        date_fields: Calendar fields to render, or None for time only
        length: Verbosity of the date fields (None when no date fields)
        time_precision: Smallest time unit, or None for date only
        zone_style: Zone display mode, or None for no zone
    """

    date_fields: DateFields | None = None
    length: FieldLength | None = None
    time_precision: TimePrecision | None = None
    zone_style: ZoneStyle | None = None

    @property
    def has_date(self) -> bool:
        """Whether any calendar field is rendered."""
        return self.date_fields is not None

    @property
    def has_time(self) -> bool:
        """Whether any time-of-day field is rendered."""
        return self.time_precision is not None

    @property
    def requires_zone(self) -> bool:
        """Whether formatting needs a zone-attached datetime."""
        return self.zone_style is not None


@dataclass(slots=True)
class FieldSetBuilder:
    """Mutable builder for CompiledFieldSet.

    Example:
        >>> builder = FieldSetBuilder()
        >>> builder.date_fields = DateFields.YMD
        >>> builder.length = FieldLength.SHORT
        >>> builder.build()
        CompiledFieldSet(date_fields=<DateFields.YMD: 'ymd'>, length=<FieldLength.SHORT: 'short'>, time_precision=None, zone_style=None)
    """

    date_fields: DateFields | None = None
    length: FieldLength | None = None
    time_precision: TimePrecision | None = None
    zone_style: ZoneStyle | None = None

    def build(self) -> CompiledFieldSet:
        """Validate the assigned axes and freeze them.

        Returns:
            CompiledFieldSet with the builder's values

        Raises:
            FieldSetError: If no field is selected, date fields lack a length,
                a length is set without date fields, or a zone is requested
                without time fields
        """
        if self.date_fields is None and self.time_precision is None:
            raise FieldSetError(ErrorTemplate.field_set_invalid("no date or time fields selected"))
        if self.date_fields is not None and self.length is None:
            raise FieldSetError(ErrorTemplate.field_set_invalid("date fields require a length"))
        if self.date_fields is None and self.length is not None:
            raise FieldSetError(ErrorTemplate.field_set_invalid("length set without date fields"))
        if self.zone_style is not None and self.time_precision is None:
            raise FieldSetError(ErrorTemplate.field_set_invalid("zone display requires time fields"))

        return CompiledFieldSet(
            date_fields=self.date_fields,
            length=self.length,
            time_precision=self.time_precision,
            zone_style=self.zone_style,
        )
