"""Performance benchmarks for formatter construction and cached formatting.

Construction resolves CLDR data and is expected to dominate; cached
formatting through a memoizer should be far cheaper.

Python 3.13+.
"""

from __future__ import annotations

from typing import Any

import pytest

from ftldatetime import DateTimeBundle, FluentDateTime
from ftldatetime.enums import DateLength, TimeLength
from ftldatetime.runtime.formatter import DateTimeFormatter
from ftldatetime.runtime.length import StyleBag
from ftldatetime.runtime.memoizer import IntlLangMemoizer

LOCALES = ["en-US", "fr-FR", "de-DE", "ja-JP", "ar-EG"]


class TestFormatterBenchmarks:
    """Benchmark the expensive and the cached paths."""

    @pytest.mark.parametrize("language", LOCALES)
    def test_formatter_instantiation(self, benchmark: Any, language: str) -> None:
        bag = StyleBag(DateLength.FULL, TimeLength.SHORT)
        formatter = benchmark(DateTimeFormatter.from_style, language, bag)
        assert formatter.language == language

    def test_cached_format(self, benchmark: Any) -> None:
        memoizer = IntlLangMemoizer("en-US")
        value = FluentDateTime.parse("1989-11-09 23:30")
        value.options.set_date_style(DateLength.LONG)

        result = benchmark(value.format, memoizer)

        assert result == "November 9, 1989"
        assert len(memoizer) == 1

    def test_bundle_format_call(self, benchmark: Any) -> None:
        bundle = DateTimeBundle("fr-FR", use_isolating=False)
        value = FluentDateTime.parse("1989-11-09 23:30")

        text, errors = benchmark(
            bundle.format_call, "DATETIME", [value], {"dateStyle": "medium"}
        )

        assert errors == ()
        assert "1989" in text

    def test_uncached_format(self, benchmark: Any) -> None:
        """Baseline for test_cached_format: build a formatter on every call."""
        value = FluentDateTime.parse("1989-11-09 23:30")
        value.options.set_date_style(DateLength.LONG)
        moment = value.value.to_datetime()

        def build_and_format() -> str:
            return value.options.make_formatter("en-US").format(moment)

        assert benchmark(build_and_format) == "November 9, 1989"
