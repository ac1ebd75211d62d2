"""The DATETIME value: a naive date-time plus its formatting options.

FluentDateTime is the FluentType a host engine receives as a variable and
hands to DATETIME(). DATETIME() clones it and merges its named arguments into
the clone's options; rendering looks up a formatter for the options' style
bag in the language memoizer and applies it.

Options recognized from FTL:
    dateStyle: full | long | medium | short
    timeStyle: full | long | medium | short

Unknown option names are ignored. A recognized name with any other value
fails the whole merge and leaves the options unchanged.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime

from ftldatetime.constants import (
    DATETIME_FUNCTION_NAME,
    FALLBACK_UNFORMATTABLE,
    OPTION_DATE_STYLE,
    OPTION_TIME_STYLE,
)
from ftldatetime.diagnostics import ErrorTemplate, FormattingError, OptionsMergeError
from ftldatetime.enums import DateLength, TimeLength

from .formatter import DateTimeFormatter
from .length import StyleBag
from .memoizer import LangMemoizer
from .timezone import attach_timezone, clamp_leap_second
from .value_types import FluentType, FluentValue, NaiveDateTime

__all__ = ["DateTimeOptions", "FluentDateTime"]

logger = logging.getLogger(__name__)


def _parse_style[E: (DateLength, TimeLength)](
    option_name: str, value: FluentValue, enum_cls: type[E]
) -> E:
    if not isinstance(value, str):
        raise OptionsMergeError(
            ErrorTemplate.type_mismatch(
                DATETIME_FUNCTION_NAME, option_name, "String", type(value).__name__
            ),
            option_name=option_name,
            option_value=value,
        )
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = tuple(member.value for member in enum_cls)
        raise OptionsMergeError(
            ErrorTemplate.invalid_style(DATETIME_FUNCTION_NAME, option_name, value, allowed),
            option_name=option_name,
            option_value=value,
        ) from e


@dataclass(slots=True)
class DateTimeOptions:
    """Mutable formatting options carried by a FluentDateTime.

    Attributes:
        length: Current style selection
    """

    length: StyleBag = field(default_factory=StyleBag.empty)

    def set_date_style(self, style: DateLength | None) -> None:
        """Replace the date style (None unsets it)."""
        self.length = self.length.set_date_style(style)

    def set_time_style(self, style: TimeLength | None) -> None:
        """Replace the time style (None unsets it)."""
        self.length = self.length.set_time_style(style)

    def merge_args(self, named: Mapping[str, FluentValue]) -> None:
        """Merge DATETIME() named arguments into these options.

        All-or-nothing: either every recognized option is applied, or the
        options are left exactly as they were.

        Args:
            named: Named arguments from the FTL call site

        Raises:
            OptionsMergeError: If a recognized option has a non-string value
                or a string outside full/long/medium/short
        """
        merged = self.length
        for name, value in named.items():
            if name == OPTION_DATE_STYLE:
                merged = merged.set_date_style(_parse_style(name, value, DateLength))
            elif name == OPTION_TIME_STYLE:
                merged = merged.set_time_style(_parse_style(name, value, TimeLength))
            else:
                logger.debug("Ignoring unknown %s option '%s'", DATETIME_FUNCTION_NAME, name)
        self.length = merged

    def make_formatter(self, language: str) -> DateTimeFormatter:
        """Build a formatter for these options without caching."""
        return DateTimeFormatter.from_style(language, self.length)


@dataclass(slots=True)
class FluentDateTime(FluentType):
    """Naive date-time value with formatting options.

    Attributes:
        value: The date-time to render, interpreted in the local zone when a
            zone is displayed
        options: Formatting options; DATETIME() never mutates the original

    Example:
        >>> dt = FluentDateTime.parse("1989-11-09 23:30")
        >>> dt.options.length.is_empty
        True
    """

    value: NaiveDateTime
    options: DateTimeOptions = field(default_factory=DateTimeOptions)

    @classmethod
    def from_datetime(cls, value: datetime | date) -> FluentDateTime:
        """Wrap a naive stdlib datetime or date with default options.

        Raises:
            ValueError: If value is an aware datetime
        """
        return cls(NaiveDateTime.from_datetime(value))

    @classmethod
    def parse(cls, text: str) -> FluentDateTime:
        """Wrap an ISO 8601 style string with default options.

        Raises:
            ValueError: If text is not a valid date-time
        """
        return cls(NaiveDateTime.parse(text))

    def duplicate(self) -> FluentDateTime:
        """Copy with independent options."""
        return FluentDateTime(self.value, DateTimeOptions(self.options.length))

    def with_args(self, named: Mapping[str, FluentValue]) -> FluentDateTime:
        """Return a copy with named merged into its options.

        Raises:
            OptionsMergeError: See DateTimeOptions.merge_args
        """
        clone = self.duplicate()
        clone.options.merge_args(named)
        return clone

    def format(self, memoizer: LangMemoizer) -> str:
        """Render with the memoizer's cached formatter for these options.

        Raises:
            FieldSetError: If the options compile to an invalid field set
            FormatterConstructionError: If the memoizer's language is unusable
            FormattingError: If CLDR pattern application fails
        """
        formatter = memoizer.try_get(DateTimeFormatter.from_style, self.options.length)
        try:
            if formatter.requires_zone:
                moment = attach_timezone(self.value)
            else:
                moment = clamp_leap_second(self.value).to_datetime()
            return formatter.format(moment)
        except (ValueError, LookupError, OverflowError) as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed(
                    DATETIME_FUNCTION_NAME, self.value.isoformat(), str(e)
                ),
                fallback_value=FALLBACK_UNFORMATTABLE,
            ) from e
