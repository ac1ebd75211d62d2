"""Locale-aware date/time formatter built from a compiled field set.

DateTimeFormatter resolves CLDR patterns once, at construction, and applies
them on every format() call. Construction is the expensive step, which is
why formatters are cached per language in the memoizers.

Field sets map onto CLDR's named patterns:
    - date YMDE/LONG -> "full", YMD/LONG -> "long", MEDIUM, SHORT
    - time SECOND + specific long zone -> "full"
    - time SECOND + specific short zone -> "long"
    - time SECOND -> "medium", MINUTE -> "short"

Date and time parts are joined with the locale's date-time glue pattern for
the date length.

Python 3.13+. Depends on: Babel (CLDR data).
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from babel.dates import get_date_format, get_datetime_format, get_time_format

from ftldatetime.diagnostics import ErrorTemplate, FormatterConstructionError
from ftldatetime.enums import DateFields, FieldLength, TimePrecision, ZoneStyle
from ftldatetime.locale_utils import resolve_locale

if TYPE_CHECKING:
    from babel import Locale
    from babel.dates import DateTimePattern

    from .fieldset import CompiledFieldSet
    from .length import StyleBag

__all__ = ["DateTimeFormatter"]

logger = logging.getLogger(__name__)

_DATE_FORMATS: dict[tuple[DateFields, FieldLength], str] = {
    (DateFields.YMDE, FieldLength.LONG): "full",
    (DateFields.YMD, FieldLength.LONG): "long",
    (DateFields.YMD, FieldLength.MEDIUM): "medium",
    (DateFields.YMD, FieldLength.SHORT): "short",
}

_TIME_FORMATS: dict[tuple[TimePrecision, ZoneStyle | None], str] = {
    (TimePrecision.SECOND, ZoneStyle.SPECIFIC_LONG): "full",
    (TimePrecision.SECOND, ZoneStyle.SPECIFIC_SHORT): "long",
    (TimePrecision.SECOND, None): "medium",
    (TimePrecision.MINUTE, None): "short",
}


class DateTimeFormatter:
    """Formats datetimes for one language and one field set.

    Immutable after construction and safe to share between threads.

    Example:
        >>> from ftldatetime.runtime.length import StyleBag
        >>> from ftldatetime.enums import DateLength
        >>> bag = StyleBag.empty().set_date_style(DateLength.LONG)
        >>> formatter = DateTimeFormatter.from_style("en-US", bag)
        >>> formatter.format(datetime(1989, 11, 9))
        'November 9, 1989'
    """

    __slots__ = (
        "_date_pattern",
        "_datetime_pattern",
        "_field_set",
        "_language",
        "_locale",
        "_time_pattern",
    )

    def __init__(self, language: str, field_set: CompiledFieldSet) -> None:
        """Resolve locale data for language and field_set.

        Args:
            language: BCP-47 language tag, possibly from untrusted input
            field_set: Compiled field set to render

        Raises:
            FormatterConstructionError: If the tag is invalid or unknown, or
                the locale data has no pattern for the field set
        """
        self._language = language
        self._field_set = field_set
        self._locale: Locale = resolve_locale(language)

        date_format = self._lookup_date_format(language, field_set)
        time_format = self._lookup_time_format(language, field_set)

        try:
            self._date_pattern: DateTimePattern | None = (
                get_date_format(date_format, locale=self._locale) if date_format else None
            )
            self._time_pattern: DateTimePattern | None = (
                get_time_format(time_format, locale=self._locale) if time_format else None
            )
            self._datetime_pattern: str | None = (
                get_datetime_format(date_format, locale=self._locale).replace("'", "")
                if date_format and time_format
                else None
            )
        except (KeyError, ValueError, AttributeError) as e:
            raise FormatterConstructionError(
                ErrorTemplate.locale_data_unsupported(language, f"missing CLDR pattern: {e}"),
                language=language,
            ) from e

        logger.debug("Built formatter for '%s': %s", language, field_set)

    @staticmethod
    def _lookup_date_format(language: str, field_set: CompiledFieldSet) -> str | None:
        if field_set.date_fields is None or field_set.length is None:
            return None
        name = _DATE_FORMATS.get((field_set.date_fields, field_set.length))
        if name is None:
            reason = f"no date pattern for {field_set.date_fields}/{field_set.length}"
            raise FormatterConstructionError(
                ErrorTemplate.locale_data_unsupported(language, reason), language=language
            )
        return name

    @staticmethod
    def _lookup_time_format(language: str, field_set: CompiledFieldSet) -> str | None:
        if field_set.time_precision is None:
            return None
        name = _TIME_FORMATS.get((field_set.time_precision, field_set.zone_style))
        if name is None:
            reason = f"no time pattern for {field_set.time_precision}/{field_set.zone_style}"
            raise FormatterConstructionError(
                ErrorTemplate.locale_data_unsupported(language, reason), language=language
            )
        return name

    @classmethod
    def from_style(cls, language: str, style: StyleBag) -> DateTimeFormatter:
        """Build a formatter for a style bag.

        Signature matches the memoizer constructor protocol, so this is the
        callable passed to try_get().

        Raises:
            FieldSetError: If the style bag compiles to an invalid field set
            FormatterConstructionError: See __init__
        """
        return cls(language, style.as_fieldset())

    @property
    def language(self) -> str:
        """Language tag the formatter was built for."""
        return self._language

    @property
    def field_set(self) -> CompiledFieldSet:
        """Field set the formatter renders."""
        return self._field_set

    @property
    def requires_zone(self) -> bool:
        """Whether format() must receive a zone-attached datetime."""
        return self._field_set.requires_zone

    def format(self, value: datetime) -> str:
        """Render value.

        Args:
            value: Aware datetime when requires_zone, naive otherwise

        Returns:
            Localized text

        Raises:
            TypeError: If the datetime's zone presence does not match the
                field set; this is a caller bug
        """
        if self.requires_zone and value.tzinfo is None:
            msg = "zone-displaying formatter requires an aware datetime"
            raise TypeError(msg)
        if not self.requires_zone and value.tzinfo is not None:
            msg = "formatter without zone display requires a naive datetime"
            raise TypeError(msg)

        date_text = self._date_pattern.apply(value, self._locale) if self._date_pattern else None
        time_text = self._time_pattern.apply(value, self._locale) if self._time_pattern else None

        if date_text is not None and time_text is not None and self._datetime_pattern:
            return self._datetime_pattern.replace("{0}", time_text).replace("{1}", date_text)
        return date_text if date_text is not None else (time_text or "")

    def __repr__(self) -> str:
        return f"DateTimeFormatter(language={self._language!r}, field_set={self._field_set!r})"
