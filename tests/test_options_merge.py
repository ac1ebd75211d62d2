"""Tests for DATETIME() option merging into DateTimeOptions."""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftldatetime.diagnostics import DiagnosticCode, OptionsMergeError
from ftldatetime.enums import DateLength, TimeLength
from ftldatetime.runtime.fluent_datetime import DateTimeOptions
from ftldatetime.runtime.length import StyleBag

STYLE_NAMES = ("full", "long", "medium", "short")


class TestMergeArgs:
    """Recognized options are parsed; unknown ones are ignored."""

    def test_date_style(self) -> None:
        options = DateTimeOptions()
        options.merge_args({"dateStyle": "full"})
        assert options.length == StyleBag(date=DateLength.FULL)

    def test_both_styles(self) -> None:
        options = DateTimeOptions()
        options.merge_args({"dateStyle": "short", "timeStyle": "medium"})
        assert options.length == StyleBag(DateLength.SHORT, TimeLength.MEDIUM)

    def test_merge_overrides_existing(self) -> None:
        options = DateTimeOptions(StyleBag(DateLength.LONG, TimeLength.LONG))
        options.merge_args({"timeStyle": "short"})
        assert options.length == StyleBag(DateLength.LONG, TimeLength.SHORT)

    def test_unknown_options_ignored(self) -> None:
        options = DateTimeOptions()
        options.merge_args({"hour12": True, "month": "long", "timeZone": "UTC"})
        assert options.length.is_empty

    def test_empty_merge_is_noop(self) -> None:
        options = DateTimeOptions(StyleBag(time=TimeLength.FULL))
        options.merge_args({})
        assert options.length == StyleBag(time=TimeLength.FULL)

    def test_setters(self) -> None:
        options = DateTimeOptions()
        options.set_date_style(DateLength.MEDIUM)
        options.set_time_style(TimeLength.SHORT)
        options.set_date_style(None)
        assert options.length == StyleBag(time=TimeLength.SHORT)


class TestMergeRejections:
    """A bad recognized option fails the whole merge."""

    @pytest.mark.parametrize("value", ["FULL", "Full", "", "huge", " short"])
    def test_unknown_style_string(self, value: str) -> None:
        options = DateTimeOptions()
        with pytest.raises(OptionsMergeError) as exc_info:
            options.merge_args({"dateStyle": value})

        assert exc_info.value.option_name == "dateStyle"
        assert exc_info.value.option_value == value
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INVALID_ARGUMENT

    @pytest.mark.parametrize("value", [1, 2.5, Decimal("3"), True, None])
    def test_non_string_value(self, value: object) -> None:
        with pytest.raises(OptionsMergeError) as exc_info:
            DateTimeOptions().merge_args({"timeStyle": value})  # type: ignore[dict-item]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.TYPE_MISMATCH

    def test_all_or_nothing(self) -> None:
        options = DateTimeOptions(StyleBag(time=TimeLength.MEDIUM))
        with pytest.raises(OptionsMergeError):
            options.merge_args({"dateStyle": "long", "timeStyle": "bogus"})
        assert options.length == StyleBag(time=TimeLength.MEDIUM)

    @given(st.text())
    def test_arbitrary_text_either_applies_or_leaves_untouched(self, value: str) -> None:
        options = DateTimeOptions()
        if value in STYLE_NAMES:
            options.merge_args({"dateStyle": value})
            assert options.length.date == DateLength(value)
        else:
            with pytest.raises(OptionsMergeError):
                options.merge_args({"dateStyle": value})
            assert options.length.is_empty
